from datetime import datetime

from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.schema import Column, UniqueConstraint
from sqlalchemy.types import JSON, DateTime, Integer, String, Uuid


class Base(DeclarativeBase):
    pass


class Progress(Base):
    __tablename__ = "progress"
    __table_args__ = (
        UniqueConstraint("player_id", "date_seed", "strategy", name="uq_progress_player_date_strategy"),
    )
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    player_id = Column(Uuid, index=True, nullable=False)
    date_seed = Column(String(10), nullable=False)
    strategy = Column(String, nullable=False)
    found_words = Column(JSON, nullable=False, default=list)
    score = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)
