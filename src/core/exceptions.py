"""
Exceptions raised outside of the rules themselves.

The rules never raise: an illegal pick or move is simply ignored.
These are for malformed requests, broken stored data and missing records.
"""


class GameError(Exception):
    """Top level exception for this project"""


class InvalidRequestError(GameError):
    """Request data cannot be interpreted (NOTE: not a ValueError, so pydantic validators let it through as is)"""


class GameStateError(GameError):
    """Stored game data cannot be turned back into a Game"""


class RepositoryError(GameError):
    """Persistence layer could not find / store a record"""
