from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, Field, field_validator


class GameStatus(str, Enum):
    """Where the player is with a game. Values are the tokens stored in games.status."""
    NOT_STARTED = "NotStarted"
    PLAYING = "Playing"
    COMPLETED = "Completed"
    DROPPED = "Dropped"
    BACKLOG = "Backlog"  # owned, not started yet
    WISHLIST = "Wishlist"  # wanted, not owned

    @classmethod
    def from_token(cls, token) -> "GameStatus":
        """
        Map a stored token to a status. Unknown tokens read back as NOT_STARTED
        instead of failing the whole record.
        """
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except ValueError:
            return cls.NOT_STARTED


class SortField(str, Enum):
    TITLE = "Title"
    RELEASE_DATE = "ReleaseDate"
    RATING = "Rating"
    PLAYTIME_HOURS = "PlaytimeHours"
    PROGRESS_PERCENT = "ProgressPercent"
    UPDATED_AT = "UpdatedAt"
    SEQUENCE_IN_FRANCHISE = "SequenceInFranchise"


class GameInput(BaseModel):
    """Payload for creating or updating a game. Range checks live in the database."""
    title: str
    franchise: Optional[str] = None
    sequence_in_franchise: Optional[int] = None
    release_date: Optional[str] = None
    platform: str = "PC"
    status: GameStatus = GameStatus.BACKLOG
    progress_percent: Optional[float] = None
    playtime_hours: Optional[float] = None
    rating: Optional[float] = None
    notes: Optional[str] = None
    cover_art_path: Optional[str] = None
    screenshots: List[str] = Field(default_factory=list)
    developer: Optional[str] = None
    publisher: Optional[str] = None
    genres: List[str] = Field(default_factory=list)


class Game(BaseModel):
    id: int
    title: str
    franchise: Optional[str] = None
    sequence_in_franchise: Optional[int] = None
    release_date: Optional[str] = None
    platform: str
    status: GameStatus
    progress_percent: Optional[float] = None
    playtime_hours: Optional[float] = None
    rating: Optional[float] = None
    notes: Optional[str] = None
    cover_art_path: Optional[str] = None
    screenshots: List[str] = Field(default_factory=list)
    developer: Optional[str] = None
    publisher: Optional[str] = None
    genres: List[str] = Field(default_factory=list)
    created_at: str
    updated_at: str

    @field_validator("status", mode="before")
    @classmethod
    def _lenient_status(cls, v):
        return GameStatus.from_token(v)

    @field_validator("screenshots", mode="before")
    @classmethod
    def _screenshot_paths(cls, v):
        return [getattr(s, "path", s) for s in v or []]

    @field_validator("genres", mode="before")
    @classmethod
    def _genre_labels(cls, v):
        return [getattr(g, "genre", g) for g in v or []]

    class Config:
        from_attributes = True


class SearchFilter(BaseModel):
    """
    Search criteria. None means "not filtered"; any other value, an empty
    string included, filters (so platform="" matches no game).
    """
    query: Optional[str] = None  # title, franchise or notes
    status: Optional[GameStatus] = None
    platform: Optional[str] = None
    franchise: Optional[str] = None
    genre: Optional[str] = None
    min_rating: Optional[float] = None
    sort_by: Optional[SortField] = None
    sort_asc: Optional[bool] = None
