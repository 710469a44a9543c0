"""JSON file repository: one file per tournament."""

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

import json
import os
from pathlib import Path
from typing import List, Optional, Union

from swisstour.constants import SAVE_FILE_EXTENSION
from swisstour.exceptions import FileLoadException, FileSaveException
from swisstour.storage.repository import Document, DocumentRepository
from swisstour.utils import setup_logger

logger = setup_logger(__name__)


class JsonFileRepository(DocumentRepository):
    """Stores each tournament as ``<tournament_id>.json`` in a directory.

    Writes go to a temporary file that then replaces the target, so a failed
    write never leaves a half-written document behind.
    """

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileSaveException(
                f"Cannot create storage directory {self.directory}: {e}"
            ) from e

    def _path(self, tournament_id: str) -> Path:
        return self.directory / f"{tournament_id}{SAVE_FILE_EXTENSION}"

    def _document_ids(self) -> List[str]:
        return sorted(p.stem for p in self.directory.glob(f"*{SAVE_FILE_EXTENSION}"))

    def _load_document(self, tournament_id: str) -> Optional[Document]:
        path = self._path(tournament_id)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load %s: %s", path, e)
            raise FileLoadException(f"Cannot load tournament file {path}: {e}") from e

    def _store_document(self, tournament_id: str, document: Document) -> None:
        path = self._path(tournament_id)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.error("Failed to save %s: %s", path, e)
            raise FileSaveException(f"Cannot save tournament file {path}: {e}") from e

    def _remove_document(self, tournament_id: str) -> bool:
        path = self._path(tournament_id)
        if not path.exists():
            return False
        try:
            path.unlink()
        except OSError as e:
            raise FileSaveException(f"Cannot delete tournament file {path}: {e}") from e
        return True
