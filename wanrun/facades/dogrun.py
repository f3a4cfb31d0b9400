import logging
from collections.abc import Collection

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import wanrun.repositories.dogrun as dogrun_repo
from wanrun.errors import ErrorDomain, NotFoundError, ServerError

logger = logging.getLogger(__name__)


class DogrunFacade:
    """Existence checks against the dogrun catalog."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def check_dogruns_exist(self, dogrun_ids: Collection[int]) -> None:
        try:
            existing = dogrun_repo.get_existing_dogrun_ids(self._db, dogrun_ids)
        except SQLAlchemyError as e:
            raise ServerError(
                "Failed to look up dogruns", domain=ErrorDomain.DOGRUN, cause=e
            ) from e

        missing = sorted(set(dogrun_ids) - existing)
        if missing:
            logger.warning("Dogruns not found: %s", missing)
            raise NotFoundError(
                f"Dogrun(s) not found: {', '.join(str(i) for i in missing)}",
                domain=ErrorDomain.DOGRUN,
            )
