from sqlalchemy import Column, DateTime, Integer, String, func

from wanrun.db.base import Base


class DogOwner(Base):
    __tablename__ = "dog_owners"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(128), nullable=False)
    email = Column(String(320), unique=True, nullable=True, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
