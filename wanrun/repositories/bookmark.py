import logging
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from wanrun.db.models.bookmark import DogrunBookmark as DogrunBookmarkModel
from wanrun.errors import ErrorDomain, ServerError, duplicate_bookmark_error

logger = logging.getLogger(__name__)


class BookmarkRepository:
    """SQLAlchemy implementation of BookmarkRepositoryInterface.

    Each insert commits on its own, so bookmarks created earlier in a batch
    survive a later failure in the same batch.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_bookmark(self, dog_owner_id: int, dogrun_id: int) -> DogrunBookmarkModel | None:
        try:
            return (
                self._db.query(DogrunBookmarkModel)
                .filter(
                    DogrunBookmarkModel.dog_owner_id == dog_owner_id,
                    DogrunBookmarkModel.dogrun_id == dogrun_id,
                )
                .first()
            )
        except SQLAlchemyError as e:
            raise ServerError(
                "Failed to look up bookmark", domain=ErrorDomain.INTERACTION, cause=e
            ) from e

    def insert_bookmark(self, dog_owner_id: int, dogrun_id: int) -> int:
        bookmark = DogrunBookmarkModel(dog_owner_id=dog_owner_id, dogrun_id=dogrun_id)
        self._db.add(bookmark)
        try:
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            # A concurrent request inserted the same pair after our existence check.
            if self.find_bookmark(dog_owner_id, dogrun_id) is not None:
                logger.warning(
                    "Bookmark insert lost a race: dog_owner_id=%s dogrun_id=%s",
                    dog_owner_id,
                    dogrun_id,
                )
                raise duplicate_bookmark_error(dogrun_id, cause=e) from e
            raise ServerError(
                "Failed to save bookmark", domain=ErrorDomain.INTERACTION, cause=e
            ) from e
        except SQLAlchemyError as e:
            self._db.rollback()
            raise ServerError(
                "Failed to save bookmark", domain=ErrorDomain.INTERACTION, cause=e
            ) from e

        self._db.refresh(bookmark)
        return bookmark.id

    def delete_bookmarks(self, dog_owner_id: int, dogrun_ids: Sequence[int]) -> int:
        if not dogrun_ids:
            return 0
        try:
            deleted = (
                self._db.query(DogrunBookmarkModel)
                .filter(
                    DogrunBookmarkModel.dog_owner_id == dog_owner_id,
                    DogrunBookmarkModel.dogrun_id.in_(list(dogrun_ids)),
                )
                .delete(synchronize_session=False)
            )
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            raise ServerError(
                "Failed to delete bookmarks", domain=ErrorDomain.INTERACTION, cause=e
            ) from e
        return deleted
