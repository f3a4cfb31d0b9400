from sqlalchemy import Column, ForeignKey, Integer, String

from wanrun.db.base import Base


class Dog(Base):
    __tablename__ = "dogs"

    id = Column(Integer, primary_key=True, index=True)
    dog_owner_id = Column(Integer, ForeignKey("dog_owners.id"), nullable=False, index=True)
    name = Column(String(128), nullable=False)
