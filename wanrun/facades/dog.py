import logging
from collections.abc import Collection

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import wanrun.repositories.dog as dog_repo
from wanrun.errors import ErrorDomain, ForbiddenError, ServerError
from wanrun.identity import Identity

logger = logging.getLogger(__name__)


class DogFacade:
    """Ownership checks against the dog catalog."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def check_dogs_owned_by(self, identity: Identity, dog_ids: Collection[int]) -> None:
        """
        Ensure every dog in ``dog_ids`` belongs to the caller.

        Dogs that do not exist are reported the same way as dogs owned by
        someone else, so callers cannot discover other owners' dog IDs.
        """
        try:
            dogs = dog_repo.get_dogs_by_ids(self._db, dog_ids)
        except SQLAlchemyError as e:
            raise ServerError("Failed to look up dogs", domain=ErrorDomain.DOG, cause=e) from e

        owned = {dog.id for dog in dogs if dog.dog_owner_id == identity.dog_owner_id}
        not_owned = sorted(set(dog_ids) - owned)
        if not_owned:
            logger.warning(
                "Dog owner %s does not own dogs %s", identity.dog_owner_id, not_owned
            )
            raise ForbiddenError(
                f"Dog(s) not owned by the caller: {', '.join(str(i) for i in not_owned)}",
                domain=ErrorDomain.DOG,
            )
