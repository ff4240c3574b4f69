"""Pixel <-> grid geometry for board renderers. No pygame needed here."""

from dataclasses import dataclass


def star_points(size):
    """Hoshi positions: corners at 3 from the edge plus the centre (9 points on 15x15)."""
    if size < 9:
        return [(size // 2, size // 2)]
    lines = (3, size // 2, size - 4)
    return [(r, c) for r in lines for c in lines]


@dataclass
class BoardLayout:
    board_size: int
    window_size: int = 800
    panel_height: int = 80
    # Margin relative to the board surface, same proportion as the wooden board art.
    margin_ratio: float = 23 / 540

    @property
    def board_display_size(self):
        return self.window_size - self.panel_height

    @property
    def margin_px(self):
        return self.board_display_size * self.margin_ratio

    @property
    def tile_size(self):
        return (self.board_display_size - 2 * self.margin_px) / (self.board_size - 1)

    @property
    def board_origin(self):
        """Top-left corner of the board surface in window pixels."""
        return (self.window_size - self.board_display_size) // 2, self.panel_height

    @property
    def grid_origin(self):
        ox, oy = self.board_origin
        return ox + self.margin_px, oy + self.margin_px

    def to_pixel(self, row, col):
        gx, gy = self.grid_origin
        return gx + col * self.tile_size, gy + row * self.tile_size

    def to_cell(self, x, y):
        """Nearest intersection to (x, y), or None when the point is off the board."""
        gx, gy = self.grid_origin
        half = self.tile_size / 2
        span = self.tile_size * (self.board_size - 1)
        if not (gx - half <= x <= gx + span + half and gy - half <= y <= gy + span + half):
            return None

        col = int(round((x - gx) / self.tile_size))
        row = int(round((y - gy) / self.tile_size))
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return row, col
        return None
