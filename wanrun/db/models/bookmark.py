from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint, func

from wanrun.db.base import Base


class DogrunBookmark(Base):
    __tablename__ = "dogrun_bookmarks"
    __table_args__ = (
        UniqueConstraint("dog_owner_id", "dogrun_id", name="uq_dogrun_bookmarks_owner_dogrun"),
    )

    id = Column(Integer, primary_key=True, index=True)
    dog_owner_id = Column(Integer, ForeignKey("dog_owners.id"), nullable=False, index=True)
    dogrun_id = Column(Integer, ForeignKey("dogruns.id"), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
