"""Date helpers for tournament records."""

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

from datetime import datetime, timezone

from dateutil import parser as date_parser

MONTHS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def utc_now_iso() -> str:
    """Current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


def parse_iso(value: str) -> datetime:
    """Parse an ISO 8601 date or timestamp.

    Raises
    ------
    ValueError
        If ``value`` is not a valid ISO 8601 string.
    """
    return date_parser.isoparse(value)


def format_date(iso_date: str) -> str:
    """Render an ISO date as ``DD Mon YYYY``, e.g. ``07 Mar 2025``."""
    parsed = parse_iso(iso_date)
    return f"{parsed.day:02d} {MONTHS[parsed.month - 1]} {parsed.year}"
