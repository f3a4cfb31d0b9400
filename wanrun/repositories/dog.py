from collections.abc import Iterable

from sqlalchemy.orm import Session

from wanrun.db.models.dog import Dog as DogModel


def get_dogs_by_ids(db: Session, dog_ids: Iterable[int]) -> list[DogModel]:
    """Get all dogs whose ID is in the given collection."""
    ids = set(dog_ids)
    if not ids:
        return []
    return db.query(DogModel).filter(DogModel.id.in_(ids)).all()
