class CatalogError(Exception):
    """Base class for every failure the catalog reports to its callers."""


class InvalidGameError(CatalogError):
    """A required field is missing or a stored value breaks a table constraint."""


class GameNotFoundError(CatalogError):
    def __init__(self, game_id: int):
        super().__init__(f"Game {game_id} not found")
        self.game_id = game_id


class StoreUnavailableError(CatalogError):
    """The shared store cannot be used (poisoned by an earlier failure or disposed)."""


class StorageError(CatalogError):
    """Error raised by the storage engine, message kept as reported."""
