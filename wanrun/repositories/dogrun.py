from collections.abc import Iterable

from sqlalchemy.orm import Session

from wanrun.db.models.dogrun import Dogrun as DogrunModel


def get_existing_dogrun_ids(db: Session, dogrun_ids: Iterable[int]) -> set[int]:
    """Return the subset of the given IDs that refer to stored dogruns."""
    ids = set(dogrun_ids)
    if not ids:
        return set()
    rows = db.query(DogrunModel.id).filter(DogrunModel.id.in_(ids)).all()
    return {row.id for row in rows}
