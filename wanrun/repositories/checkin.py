from collections.abc import Sequence
from datetime import date

from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wanrun.db.models.checkin import DogrunCheckin as DogrunCheckinModel
from wanrun.errors import ErrorDomain, ServerError

# Natural key of a check-in, backed by uq_dogrun_checkins_dogrun_dog_date
CHECKIN_KEY = ("dogrun_id", "dog_id", "checkin_date")


class CheckinRepository:
    """SQLAlchemy implementation of CheckinRepositoryInterface."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_checkin(
        self, dogrun_id: int, dog_id: int, checkin_date: date
    ) -> DogrunCheckinModel | None:
        try:
            return (
                self._db.query(DogrunCheckinModel)
                .filter(
                    DogrunCheckinModel.dogrun_id == dogrun_id,
                    DogrunCheckinModel.dog_id == dog_id,
                    DogrunCheckinModel.checkin_date == checkin_date,
                )
                .first()
            )
        except SQLAlchemyError as e:
            raise ServerError(
                "Failed to look up check-in", domain=ErrorDomain.INTERACTION, cause=e
            ) from e

    def upsert_checkins(self, checkins: Sequence[DogrunCheckinModel]) -> None:
        """
        Save all check-ins in a single INSERT ... ON CONFLICT DO UPDATE.

        Rows whose (dogrun_id, dog_id, checkin_date) already exist keep their
        id and created_at; only updated_at moves. A row inserted concurrently
        by another request is treated the same way.
        """
        if not checkins:
            return

        rows = [
            {
                "dogrun_id": checkin.dogrun_id,
                "dog_id": checkin.dog_id,
                "checkin_date": checkin.checkin_date,
            }
            for checkin in checkins
        ]

        # Detect database type for the dialect-specific upsert construct
        if self._db.get_bind().dialect.name == "sqlite":
            stmt = sqlite.insert(DogrunCheckinModel).values(rows)
        else:
            stmt = postgresql.insert(DogrunCheckinModel).values(rows)
        stmt = stmt.on_conflict_do_update(
            index_elements=list(CHECKIN_KEY),
            set_={"updated_at": func.now()},
        )

        try:
            self._db.execute(stmt)
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            raise ServerError(
                "Failed to save check-ins", domain=ErrorDomain.INTERACTION, cause=e
            ) from e
