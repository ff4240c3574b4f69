"""Pygame-based board renderer and input helper."""

from ..Player import NEW_GAME, QUIT, RESET_SCORE, UNDO, Action
from ..engine.state import Color, PhaseKind
from .layout import BoardLayout, star_points


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (30, 27, 75)
    COLOR_BOARD = (30, 41, 59)
    COLOR_GRID = (90, 98, 120)
    COLOR_STAR = (150, 155, 175)
    COLOR_TEXT = (230, 230, 230)
    COLOR_PANEL = (20, 18, 50)
    COLOR_BLACK_STONE = (28, 28, 54)
    COLOR_BLACK_SHINE = (90, 90, 138)
    COLOR_WHITE_STONE = (224, 224, 239)
    COLOR_WHITE_SHINE = (255, 255, 255)
    COLOR_HIGHLIGHT = (167, 139, 250)
    COLOR_LAST_BLACK = (167, 139, 250)
    COLOR_LAST_WHITE = (99, 102, 241)

    PANEL_HEIGHT = 80

    def __init__(self, board_size, window_size=800, show_hover=True):
        import pygame

        self._pygame = pygame
        self.show_hover = show_hover
        self.layout = BoardLayout(board_size, window_size=window_size, panel_height=self.PANEL_HEIGHT)

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size))
        pygame.display.set_caption("Omok Duel")

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 24)

        self.board_surface = self._build_board_surface()

    @property
    def stone_radius(self):
        return self.layout.tile_size * 0.42

    def _build_board_surface(self):
        pygame = self._pygame
        layout = self.layout
        size_px = layout.board_display_size
        surf = pygame.Surface((size_px, size_px)).convert()
        surf.fill(self.COLOR_BOARD)

        grid_start = layout.margin_px
        grid_end = size_px - layout.margin_px
        for i in range(layout.board_size):
            offset = grid_start + i * layout.tile_size
            pygame.draw.line(surf, self.COLOR_GRID, (grid_start, offset), (grid_end, offset), 1)
            pygame.draw.line(surf, self.COLOR_GRID, (offset, grid_start), (offset, grid_end), 1)
        for r, c in star_points(layout.board_size):
            center = (grid_start + c * layout.tile_size, grid_start + r * layout.tile_size)
            pygame.draw.circle(surf, self.COLOR_STAR, center, 4)
        return surf

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_stone(self, row, col, stone_color, alpha=None):
        pygame = self._pygame
        cx, cy = self.layout.to_pixel(row, col)
        r = self.stone_radius
        if stone_color == Color.BLACK:
            base, shine = self.COLOR_BLACK_STONE, self.COLOR_BLACK_SHINE
        else:
            base, shine = self.COLOR_WHITE_STONE, self.COLOR_WHITE_SHINE

        if alpha is None:
            pygame.draw.circle(self.screen, base, (cx, cy), r)
            pygame.draw.circle(self.screen, shine, (cx - r * 0.28, cy - r * 0.3), r * 0.32)
            return

        # Translucent preview
        diameter = int(r * 2) + 2
        ghost = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        pygame.draw.circle(ghost, (*base, alpha), (diameter / 2, diameter / 2), r)
        self.screen.blit(ghost, (cx - diameter / 2, cy - diameter / 2))

    def _draw_stones(self, state):
        for row, cells in enumerate(state.board):
            for col, stone_color in enumerate(cells):
                if stone_color == 0:
                    continue
                self._draw_stone(row, col, stone_color)

    def _draw_last_move_marker(self, state):
        last = state.last_move
        if last is None:
            return
        cx, cy = self.layout.to_pixel(last.row, last.col)
        color = self.COLOR_LAST_BLACK if last.player is Color.BLACK else self.COLOR_LAST_WHITE
        self._pygame.draw.circle(self.screen, color, (cx, cy), 5)

    def _draw_winning_run(self, state):
        r = self.stone_radius
        for row, col in state.phase.winning_cells:
            cx, cy = self.layout.to_pixel(row, col)
            self._pygame.draw.circle(self.screen, self.COLOR_HIGHLIGHT, (cx, cy), r + 4, 3)
            self._pygame.draw.circle(self.screen, self.COLOR_HIGHLIGHT, (cx, cy), r + 7, 1)

    def _draw_hover_marker(self, state):
        if not self.show_hover or state.phase.is_terminal:
            return
        coords = self.layout.to_cell(*self._pygame.mouse.get_pos())
        if coords and state.board[coords[0]][coords[1]] == 0:
            self._draw_stone(coords[0], coords[1], state.current_player, alpha=110)

    def _draw_info_panel(self, state):
        width = self.layout.window_size
        panel_rect = self._pygame.Rect(0, 0, width, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_PANEL, panel_rect)

        phase = state.phase
        if phase.kind is PhaseKind.WON:
            self._draw_text(f"{phase.winner.label} Wins!", self.font_large, self.COLOR_TEXT, (width / 2, 30))
        elif phase.kind is PhaseKind.DRAWN:
            self._draw_text("Draw", self.font_large, self.COLOR_TEXT, (width / 2, 30))
        else:
            msg = f"{state.current_player.label} to move"
            self._draw_text(msg, self.font_medium, self.COLOR_TEXT, (width / 2, 30))

        score = state.score
        footer = f"Black {score.black} : {score.white} White    [U] undo  [N] new game  [R] reset score"
        self._draw_text(footer, self.font_small, self.COLOR_TEXT, (width / 2, 62))

    def render(self, state):
        self.screen.fill(self.COLOR_BACKGROUND)
        self.screen.blit(self.board_surface, self.layout.board_origin)

        self._draw_stones(state)
        self._draw_last_move_marker(state)
        self._draw_winning_run(state)
        self._draw_info_panel(state)

        self._pygame.display.flip()

    def _action_for_event(self, event, state):
        pygame = self._pygame
        if event.type == pygame.QUIT:
            return Action(QUIT)
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return Action(QUIT)
            if event.key in (pygame.K_u, pygame.K_BACKSPACE):
                return Action(UNDO)
            if event.key in (pygame.K_n, pygame.K_RETURN):
                return Action(NEW_GAME)
            if event.key == pygame.K_r:
                return Action(RESET_SCORE)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not state.phase.is_terminal:
            coords = self.layout.to_cell(*event.pos)
            if coords:
                return Action.place(*coords)
        return None

    def wait_for_action(self, state):
        pygame = self._pygame
        while True:
            for event in pygame.event.get():
                action = self._action_for_event(event, state)
                if action is not None:
                    return action

            # Re-render the board with the hover marker
            self.render(state)
            self._draw_hover_marker(state)
            pygame.display.flip()

            pygame.time.delay(10)

    def close(self):
        self._pygame.quit()
