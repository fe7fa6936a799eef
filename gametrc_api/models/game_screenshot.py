from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from ..models import Base


class GameScreenshot(Base):
    __tablename__ = "game_screenshots"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    game_id = Column(Integer, ForeignKey("games.id", ondelete="CASCADE"), nullable=False)
    path = Column(String, nullable=False)

    game = relationship("Game", back_populates="screenshots")

    def __repr__(self):
        return f"<GameScreenshot(id={self.id}, game_id={self.game_id}, path={self.path})>"
