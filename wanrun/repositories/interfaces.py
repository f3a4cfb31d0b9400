from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from wanrun.db.models.bookmark import DogrunBookmark
from wanrun.db.models.checkin import DogrunCheckin


class BookmarkRepositoryInterface(Protocol):
    """Storage contract for dogrun bookmarks.

    A (dog_owner_id, dogrun_id) pair is bookmarked at most once.
    """

    def find_bookmark(
        self, dog_owner_id: int, dogrun_id: int
    ) -> DogrunBookmark | None:  # pragma: no cover - Protocol
        ...

    def insert_bookmark(
        self, dog_owner_id: int, dogrun_id: int
    ) -> int:  # pragma: no cover - Protocol
        """Persist a new bookmark and return its id.

        Raises DuplicateResourceError when the pair is already bookmarked.
        """
        ...

    def delete_bookmarks(
        self, dog_owner_id: int, dogrun_ids: Sequence[int]
    ) -> int:  # pragma: no cover - Protocol
        """Delete the owner's bookmarks for the given dogruns, return the number removed."""
        ...


class CheckinRepositoryInterface(Protocol):
    """Storage contract for dogrun check-ins.

    A (dogrun_id, dog_id, checkin_date) triple is stored at most once.
    """

    def find_checkin(
        self, dogrun_id: int, dog_id: int, checkin_date: date
    ) -> DogrunCheckin | None:  # pragma: no cover - Protocol
        ...

    def upsert_checkins(
        self, checkins: Sequence[DogrunCheckin]
    ) -> None:  # pragma: no cover - Protocol
        """Insert check-ins that are absent, update the existing ones in place."""
        ...
