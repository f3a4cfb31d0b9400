import logging
from collections.abc import Sequence

from wanrun.core.config import settings
from wanrun.domain.id_batch import id_batch_problem
from wanrun.errors import DomainValidationError, ErrorDomain, duplicate_bookmark_error
from wanrun.facades.interfaces import DogrunFacadeInterface
from wanrun.identity import Identity
from wanrun.repositories.interfaces import BookmarkRepositoryInterface

logger = logging.getLogger(__name__)


class BookmarkService:
    """Dogrun bookmarks of a dog owner.

    Depends only on BookmarkRepositoryInterface and DogrunFacadeInterface,
    never on the SQLAlchemy implementations.
    """

    def __init__(
        self, repo: BookmarkRepositoryInterface, dogrun_facade: DogrunFacadeInterface
    ) -> None:
        self._repo = repo
        self._dogrun_facade = dogrun_facade

    def add_bookmarks(self, identity: Identity, dogrun_ids: Sequence[int]) -> list[int]:
        """
        Bookmark each dogrun for the caller and return the new bookmark IDs in input order.

        - Validates the batch (non-empty, bounded, no repeated IDs)
        - Validates every dogrun exists before anything is written
        - Stops at the first dogrun that is already bookmarked

        The batch is not atomic: bookmarks created before a duplicate is found
        stay persisted.

        Raises:
            DomainValidationError: If the batch is malformed
            NotFoundError: If any dogrun does not exist (nothing is written)
            DuplicateResourceError: If a dogrun is already bookmarked by the caller
        """
        problem = id_batch_problem(dogrun_ids, settings.max_batch_size)
        if problem:
            raise DomainValidationError(
                f"Invalid dogrun IDs: {problem}", domain=ErrorDomain.INTERACTION
            )

        logger.info(
            "Adding bookmarks: dog_owner_id=%s dogrun_ids=%s",
            identity.dog_owner_id,
            list(dogrun_ids),
        )
        self._dogrun_facade.check_dogruns_exist(dogrun_ids)

        bookmark_ids: list[int] = []
        for dogrun_id in dogrun_ids:
            if self._repo.find_bookmark(identity.dog_owner_id, dogrun_id) is not None:
                logger.warning(
                    "Dogrun %s already bookmarked by dog owner %s (%d created before)",
                    dogrun_id,
                    identity.dog_owner_id,
                    len(bookmark_ids),
                )
                raise duplicate_bookmark_error(dogrun_id)
            bookmark_ids.append(self._repo.insert_bookmark(identity.dog_owner_id, dogrun_id))

        return bookmark_ids

    def delete_bookmarks(self, identity: Identity, dogrun_ids: Sequence[int]) -> None:
        """Remove the caller's bookmarks for the given dogruns. IDs that are not bookmarked are ignored."""
        deleted = self._repo.delete_bookmarks(identity.dog_owner_id, dogrun_ids)
        logger.info(
            "Deleted bookmarks: dog_owner_id=%s dogrun_ids=%s removed=%d",
            identity.dog_owner_id,
            list(dogrun_ids),
            deleted,
        )
