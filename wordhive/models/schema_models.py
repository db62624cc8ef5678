from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel


class ProgressSchema(BaseModel):
    player_id: UUID
    date_seed: str
    strategy: str
    found_words: List[str]
    score: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
