from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from ..models import Base


class GameGenre(Base):
    __tablename__ = "game_genres"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    game_id = Column(Integer, ForeignKey("games.id", ondelete="CASCADE"), nullable=False)
    genre = Column(String, nullable=False)

    game = relationship("Game", back_populates="genres")

    def __repr__(self):
        return f"<GameGenre(id={self.id}, game_id={self.game_id}, genre={self.genre})>"
