from sqlalchemy.orm import declarative_base

Base = declarative_base()

from .game import Game
from .game_screenshot import GameScreenshot
from .game_genre import GameGenre
