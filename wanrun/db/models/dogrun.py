from sqlalchemy import Column, DateTime, Integer, String, func

from wanrun.db.base import Base


class Dogrun(Base):
    __tablename__ = "dogruns"

    id = Column(Integer, primary_key=True, index=True)
    # Google Places identifier, null for dogruns registered by hand
    place_id = Column(String(256), unique=True, nullable=True)
    name = Column(String(256), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
