from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, UniqueConstraint, func

from wanrun.db.base import Base


class DogrunCheckin(Base):
    __tablename__ = "dogrun_checkins"
    __table_args__ = (
        UniqueConstraint(
            "dogrun_id", "dog_id", "checkin_date", name="uq_dogrun_checkins_dogrun_dog_date"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    dogrun_id = Column(Integer, ForeignKey("dogruns.id"), nullable=False, index=True)
    dog_id = Column(Integer, ForeignKey("dogs.id"), nullable=False)
    checkin_date = Column(Date, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now())
