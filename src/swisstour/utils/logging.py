"""Logging utilities."""

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


import logging
import os
import sys
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from swisstour.constants import LOG_DIR_ENV

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"

LOG_FILE_NAME = "swisstour.log"


def _log_folder() -> Optional[Path]:
    """Pick a writable folder for the log file.

    ``SWISSTOUR_LOG_DIR`` wins when set. Otherwise %APPDATA%\\SwissTour on
    Windows and ~/.local/state/swisstour elsewhere, falling back to the temp
    directory.
    """
    override = os.environ.get(LOG_DIR_ENV)
    if override:
        return Path(override)

    if sys.platform == "win32" and os.environ.get("APPDATA"):
        base = Path(os.environ["APPDATA"]) / "SwissTour"
    else:
        base = Path.home() / ".local" / "state" / "swisstour"

    for candidate in (base / "logs", Path(tempfile.gettempdir()) / "swisstour" / "logs"):
        try:
            candidate.mkdir(parents=True, exist_ok=True)
            return candidate
        except OSError:
            continue
    return None


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up logger for a python module.

    Sets up file handler and console handler

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    lgr.setLevel(logging.INFO)
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    log_formatter = logging.Formatter(LOG_FMT)

    file_handler = None
    log_folder = _log_folder()
    if log_folder is not None:
        try:
            log_folder.mkdir(parents=True, exist_ok=True)
            # Rotating so the log never grows unbounded
            file_handler = RotatingFileHandler(
                log_folder / LOG_FILE_NAME,
                maxBytes=5 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setFormatter(log_formatter)
        except OSError:
            # continue without file logging
            file_handler = None

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(logging.WARNING)
    lgr.addHandler(console_handler)
    if file_handler:
        lgr.addHandler(file_handler)
    lgr.debug("logger %s initialized", logger_name)
    return lgr


#  LocalWords:  APPDATA
