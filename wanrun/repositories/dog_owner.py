from sqlalchemy.orm import Session

from wanrun.db.models.dog_owner import DogOwner as DogOwnerModel


def get_dog_owner_by_id(db: Session, dog_owner_id: int) -> DogOwnerModel | None:
    """Get a dog owner by ID."""
    return db.query(DogOwnerModel).filter(DogOwnerModel.id == dog_owner_id).first()
