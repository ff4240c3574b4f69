"""Board state container: cell occupancy for a square Omok grid."""

EMPTY = 0
BLACK = -1
WHITE = 1

MIN_SIZE = 5


class BoardError(Exception):
    """Base class for board construction and addressing errors."""


class InvalidSize(BoardError, ValueError):
    def __init__(self, size):
        super().__init__(f"board size must be at least {MIN_SIZE}, got {size}")
        self.size = size


class OutOfBounds(BoardError, IndexError):
    def __init__(self, row, col, size):
        super().__init__(f"cell ({row}, {col}) outside a {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class Board:
    def __init__(self, size=15):
        # Store cells as -1 (black), 0 (empty), 1 (white), indexed cells[row][col]
        self.size = 0
        self.cells = []
        self.reset(size)

    def reset(self, size=None):
        """Clear every cell, optionally resizing; raise InvalidSize before touching anything."""
        if size is None:
            size = self.size
        if size < MIN_SIZE:
            raise InvalidSize(size)
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row, col):
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.size)
        return self.cells[row][col]

    def set(self, row, col, value):
        """Write one cell. Legality is the caller's business."""
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.size)
        if value not in (EMPTY, BLACK, WHITE):
            raise ValueError("value must be 0 (empty), -1 (black) or 1 (white)")
        self.cells[row][col] = value

    def is_full(self):
        return all(cell != EMPTY for row in self.cells for cell in row)

    def rows(self):
        """Immutable copy of the grid, safe to hand to renderers."""
        return tuple(tuple(row) for row in self.cells)

