from sqlalchemy import Column, Integer, String, Float, CheckConstraint, Index
from sqlalchemy.orm import relationship

from ..models import Base


class Game(Base):
    __tablename__ = "games"
    __table_args__ = (
        CheckConstraint(
            "progress_percent IS NULL OR (progress_percent >= 0 AND progress_percent <= 100)",
            name="ck_games_progress_percent",
        ),
        CheckConstraint("playtime_hours IS NULL OR playtime_hours >= 0", name="ck_games_playtime_hours"),
        CheckConstraint("rating IS NULL OR (rating >= 1 AND rating <= 10)", name="ck_games_rating"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    franchise = Column(String, nullable=True)
    sequence_in_franchise = Column(Integer, nullable=True)
    release_date = Column(String, nullable=True)  # YYYY-MM-DD
    platform = Column(String, nullable=False, default="PC", server_default="PC")
    status = Column(String, nullable=False, default="Backlog", server_default="Backlog")
    progress_percent = Column(Float, nullable=True)
    playtime_hours = Column(Float, nullable=True)
    rating = Column(Float, nullable=True)
    notes = Column(String, nullable=True)
    cover_art_path = Column(String, nullable=True)
    developer = Column(String, nullable=True)
    publisher = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    screenshots = relationship(
        "GameScreenshot",
        order_by="GameScreenshot.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
        back_populates="game",
    )
    genres = relationship(
        "GameGenre",
        order_by="GameGenre.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
        back_populates="game",
    )

    def __repr__(self):
        return f"<Game(id={self.id}, title={self.title}, status={self.status})>"


Index("idx_games_title", Game.__table__.c.title.collate("nocase"))
Index("idx_games_status", Game.__table__.c.status)
Index("idx_games_franchise", Game.__table__.c.franchise)
Index("idx_games_platform", Game.__table__.c.platform)
Index("idx_games_rating", Game.__table__.c.rating)
