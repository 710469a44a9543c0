"""In-memory repository."""

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

import copy
from typing import Dict, List, Optional

from swisstour.storage.repository import Document, DocumentRepository


class InMemoryRepository(DocumentRepository):
    """Keeps tournament documents in a dict keyed by tournament id.

    Documents are deep-copied on the way in and out, so callers can never
    alter stored state without going through the repository.
    """

    def __init__(self) -> None:
        self._documents: Dict[str, Document] = {}

    def _document_ids(self) -> List[str]:
        return list(self._documents)

    def _load_document(self, tournament_id: str) -> Optional[Document]:
        document = self._documents.get(tournament_id)
        return copy.deepcopy(document) if document is not None else None

    def _store_document(self, tournament_id: str, document: Document) -> None:
        self._documents[tournament_id] = copy.deepcopy(document)

    def _remove_document(self, tournament_id: str) -> bool:
        return self._documents.pop(tournament_id, None) is not None
