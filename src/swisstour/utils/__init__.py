"""Shared utilities: logger setup, id generation and date helpers."""

# SwissTour
# Copyright (C) 2025  SwissTour developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import uuid

from swisstour.utils.date import format_date, parse_iso, utc_now_iso
from swisstour.utils.logging import setup_logger


def generate_id() -> str:
    """Generate a unique identifier for a record."""
    return str(uuid.uuid4())


__all__ = [
    "format_date",
    "generate_id",
    "parse_iso",
    "setup_logger",
    "utc_now_iso",
]
