from pydantic import BaseModel
from typing import List, Optional


class StatusBreakdown(BaseModel):
    not_started: int = 0
    playing: int = 0
    completed: int = 0
    dropped: int = 0
    backlog: int = 0
    wishlist: int = 0


class CountEntry(BaseModel):
    name: str
    count: int

    class Config:
        from_attributes = True


class GameStats(BaseModel):
    total_games: int
    by_status: StatusBreakdown
    total_playtime_hours: float
    average_rating: Optional[float] = None
    completion_rate: float  # % of non-wishlist games completed
    games_by_platform: List[CountEntry]
    games_by_genre: List[CountEntry]
    games_by_franchise: List[CountEntry]
    recent_completions: List[str]
