"""Persistence interface for tournaments, players and rounds.

Storage is keyed by tournament id. Every operation reads, modifies and writes
the records of a single tournament, so editing one row never rewrites other
tournaments.
"""

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

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from swisstour.exceptions import (
    RoundNotFoundException,
    TournamentNotFoundException,
    TournamentStateException,
)
from swisstour.models import Player, Round, Tournament
from swisstour.utils import setup_logger

logger = setup_logger(__name__)

# One stored document per tournament
Document = Dict[str, Any]


class TournamentRepository(ABC):
    """Abstract record store used by the round manager."""

    @abstractmethod
    def list_tournaments(self) -> List[Tournament]:
        raise NotImplementedError

    @abstractmethod
    def get_tournament(self, tournament_id: str) -> Optional[Tournament]:
        raise NotImplementedError

    @abstractmethod
    def save_tournament(self, tournament: Tournament) -> None:
        raise NotImplementedError

    @abstractmethod
    def update_tournament(self, tournament: Tournament) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete_tournament(self, tournament_id: str) -> bool:
        """Delete a tournament together with its players and rounds."""
        raise NotImplementedError

    @abstractmethod
    def list_players(self, tournament_id: str) -> List[Player]:
        raise NotImplementedError

    @abstractmethod
    def add_players(self, tournament_id: str, players: Iterable[Player]) -> None:
        raise NotImplementedError

    @abstractmethod
    def replace_players(self, tournament_id: str, players: Iterable[Player]) -> None:
        raise NotImplementedError

    @abstractmethod
    def list_rounds(self, tournament_id: str) -> List[Round]:
        raise NotImplementedError

    @abstractmethod
    def get_round(self, tournament_id: str, round_number: int) -> Optional[Round]:
        raise NotImplementedError

    @abstractmethod
    def save_round(self, round_data: Round) -> None:
        raise NotImplementedError

    @abstractmethod
    def update_round(self, round_data: Round) -> None:
        raise NotImplementedError


class DocumentRepository(TournamentRepository):
    """Repository storing each tournament as one serialized document.

    Subclasses only provide document load/store. A document has the shape::

        {"tournament": {...}, "players": [{...}], "rounds": [{...}]}
    """

    @abstractmethod
    def _document_ids(self) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def _load_document(self, tournament_id: str) -> Optional[Document]:
        raise NotImplementedError

    @abstractmethod
    def _store_document(self, tournament_id: str, document: Document) -> None:
        raise NotImplementedError

    @abstractmethod
    def _remove_document(self, tournament_id: str) -> bool:
        raise NotImplementedError

    def _require_document(self, tournament_id: str) -> Document:
        document = self._load_document(tournament_id)
        if document is None:
            raise TournamentNotFoundException(f"Tournament {tournament_id} not found")
        return document

    # ========== Tournaments ==========

    def list_tournaments(self) -> List[Tournament]:
        tournaments = []
        for tournament_id in self._document_ids():
            document = self._load_document(tournament_id)
            if document is not None:
                tournaments.append(Tournament.from_dict(document["tournament"]))
        return sorted(tournaments, key=lambda t: t.created_at)

    def get_tournament(self, tournament_id: str) -> Optional[Tournament]:
        document = self._load_document(tournament_id)
        if document is None:
            return None
        return Tournament.from_dict(document["tournament"])

    def save_tournament(self, tournament: Tournament) -> None:
        document = self._load_document(tournament.id) or {"players": [], "rounds": []}
        document["tournament"] = tournament.to_dict()
        self._store_document(tournament.id, document)
        logger.debug("Saved tournament %s", tournament.id)

    def update_tournament(self, tournament: Tournament) -> None:
        document = self._require_document(tournament.id)
        document["tournament"] = tournament.to_dict()
        self._store_document(tournament.id, document)

    def delete_tournament(self, tournament_id: str) -> bool:
        removed = self._remove_document(tournament_id)
        if removed:
            logger.info("Deleted tournament %s", tournament_id)
        return removed

    # ========== Players ==========

    def list_players(self, tournament_id: str) -> List[Player]:
        document = self._load_document(tournament_id)
        if document is None:
            return []
        return [Player.from_dict(p) for p in document["players"]]

    def add_players(self, tournament_id: str, players: Iterable[Player]) -> None:
        document = self._require_document(tournament_id)
        document["players"].extend(p.to_dict() for p in players)
        self._store_document(tournament_id, document)

    def replace_players(self, tournament_id: str, players: Iterable[Player]) -> None:
        document = self._require_document(tournament_id)
        document["players"] = [p.to_dict() for p in players]
        self._store_document(tournament_id, document)

    # ========== Rounds ==========

    def list_rounds(self, tournament_id: str) -> List[Round]:
        document = self._load_document(tournament_id)
        if document is None:
            return []
        rounds = [Round.from_dict(r) for r in document["rounds"]]
        return sorted(rounds, key=lambda r: r.round_number)

    def get_round(self, tournament_id: str, round_number: int) -> Optional[Round]:
        for round_data in self.list_rounds(tournament_id):
            if round_data.round_number == round_number:
                return round_data
        return None

    def save_round(self, round_data: Round) -> None:
        """Store a new round. A round number is never created twice."""
        document = self._require_document(round_data.tournament_id)
        for stored in document["rounds"]:
            if stored["round_number"] == round_data.round_number:
                raise TournamentStateException(
                    f"Round {round_data.round_number} already exists for "
                    f"tournament {round_data.tournament_id}"
                )
        document["rounds"].append(round_data.to_dict())
        self._store_document(round_data.tournament_id, document)

    def update_round(self, round_data: Round) -> None:
        document = self._require_document(round_data.tournament_id)
        for index, stored in enumerate(document["rounds"]):
            if stored["id"] == round_data.id:
                document["rounds"][index] = round_data.to_dict()
                self._store_document(round_data.tournament_id, document)
                return
        raise RoundNotFoundException(
            f"Round {round_data.id} not found in tournament {round_data.tournament_id}"
        )
