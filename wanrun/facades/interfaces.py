from __future__ import annotations

from collections.abc import Collection
from typing import Protocol

from wanrun.identity import Identity


class DogrunFacadeInterface(Protocol):
    def check_dogruns_exist(
        self, dogrun_ids: Collection[int]
    ) -> None:  # pragma: no cover - Protocol
        """Raise NotFoundError naming the missing IDs unless every dogrun exists."""
        ...


class DogFacadeInterface(Protocol):
    def check_dogs_owned_by(
        self, identity: Identity, dog_ids: Collection[int]
    ) -> None:  # pragma: no cover - Protocol
        """Raise ForbiddenError unless every dog belongs to the caller."""
        ...
