class LabyrinthError(Exception):
    """Base error for maze generation and placement."""


class InvalidDimensions(LabyrinthError, ValueError):
    """Raised when a grid is requested with a width or height below 1."""


class InvalidStartCell(InvalidDimensions):
    """Raised when carving is asked to start outside the grid."""


class NonAdjacentCells(LabyrinthError, ValueError):
    """Raised when a wall removal is attempted between cells that are not neighbours."""


class GridAlreadyCarved(LabyrinthError):
    """Raised when carving a grid that already has visited cells."""


class NoValidAdversarySpot(LabyrinthError):
    """Raised when no cell other than the player's exists (1x1 maze)."""


class SettingsError(LabyrinthError):
    """Raised when a settings file cannot be read or parsed."""
