"""Pygame-based board renderer and input helper."""

from ..Board import Cell


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_WOOD = (209, 179, 135)
    COLOR_GRID = (60, 40, 20)
    COLOR_TEXT = (230, 230, 230)
    COLOR_RED = (200, 0, 0)
    COLOR_WIN = (230, 180, 30)
    COLOR_BLACK_STONE = (20, 20, 20)
    COLOR_WHITE_STONE = (240, 240, 235)

    PANEL_HEIGHT = 80
    MARGIN_RATIO = 23 / 540

    def __init__(self, board_size, window_size=800):
        import pygame

        self.board_size = board_size
        self.window_size = window_size
        self._pygame = pygame
        self._last_snapshot = None

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size))
        pygame.display.set_caption("Zen Gomoku")

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)

        # The board surface is smaller to accommodate the info panel
        self.board_display_size = window_size - self.PANEL_HEIGHT
        self.margin_px = self.board_display_size * self.MARGIN_RATIO
        self.board_surface = self._build_board_surface(self.board_display_size)
        self.tile_size = (self.board_display_size - 2 * self.margin_px) / max(board_size - 1, 1)
        self.stone_radius = self.tile_size * 0.45

        self.board_origin = (
            (window_size - self.board_display_size) // 2,
            self.PANEL_HEIGHT,
        )

    def _grid_origin(self):
        ox, oy = self.board_origin
        return ox + self.margin_px, oy + self.margin_px

    def _cell_center(self, row, col):
        gx, gy = self._grid_origin()
        return gx + col * self.tile_size, gy + row * self.tile_size

    def _build_board_surface(self, size_px):
        pygame = self._pygame
        surf = pygame.Surface((size_px, size_px)).convert()
        surf.fill(self.COLOR_WOOD)
        grid_start = self.margin_px
        grid_end = size_px - self.margin_px
        tile = (grid_end - grid_start) / max(self.board_size - 1, 1)
        for i in range(self.board_size):
            offset = grid_start + i * tile
            pygame.draw.line(surf, self.COLOR_GRID, (grid_start, offset), (grid_end, offset), 1)
            pygame.draw.line(surf, self.COLOR_GRID, (offset, grid_start), (offset, grid_end), 1)
        return surf

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_stone(self, row, col, value, alpha=None):
        color = self.COLOR_BLACK_STONE if value == Cell.BLACK else self.COLOR_WHITE_STONE
        cx, cy = self._cell_center(row, col)
        if alpha is None:
            self._pygame.draw.circle(self.screen, color, (cx, cy), self.stone_radius)
            return
        size = int(self.stone_radius * 2) + 2
        ghost = self._pygame.Surface((size, size), self._pygame.SRCALPHA)
        self._pygame.draw.circle(ghost, (*color, alpha), (size / 2, size / 2), self.stone_radius)
        self.screen.blit(ghost, (cx - size / 2, cy - size / 2))

    def _draw_stones(self, board):
        for row, values in enumerate(board.cells):
            for col, value in enumerate(values):
                if value != Cell.EMPTY:
                    self._draw_stone(row, col, value)

    def _draw_winning_line(self, line):
        for row, col in line:
            self._pygame.draw.circle(self.screen, self.COLOR_WIN, self._cell_center(row, col), self.stone_radius, 3)

    def _draw_last_move_marker(self, last_move):
        if not last_move:
            return
        # A simple red dot in the center of the piece
        self._pygame.draw.circle(self.screen, self.COLOR_RED, self._cell_center(*last_move), self.tile_size * 0.2)

    def _draw_info_panel(self, snapshot):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)
        center = (self.window_size / 2, self.PANEL_HEIGHT / 2)

        if snapshot.winner is not None:
            self._draw_text(f"{snapshot.winner.label} Wins!", self.font_large, self.COLOR_TEXT, center)
        elif snapshot.drawn:
            self._draw_text("Draw", self.font_large, self.COLOR_TEXT, center)
        elif snapshot.thinking:
            self._draw_text("AI is thinking...", self.font_medium, self.COLOR_TEXT, center)
        else:
            msg = f"{snapshot.current_player.label} to move ({snapshot.mode.value})"
            self._draw_text(msg, self.font_medium, self.COLOR_TEXT, center)

    def render(self, snapshot):
        self._last_snapshot = snapshot
        self.screen.fill(self.COLOR_BACKGROUND)
        self.screen.blit(self.board_surface, self.board_origin)

        self._draw_stones(snapshot.board)
        self._draw_winning_line(snapshot.winning_line)
        self._draw_last_move_marker(snapshot.last_move)
        self._draw_info_panel(snapshot)

        self._pygame.display.flip()

    def _get_coords_from_mouse(self, pos):
        mx, my = pos
        gx, gy = self._grid_origin()
        col = int(round((mx - gx) / self.tile_size))
        row = int(round((my - gy) / self.tile_size))
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return row, col
        return None

    def _draw_hover_marker(self, board, player_color):
        coords = self._get_coords_from_mouse(self._pygame.mouse.get_pos())
        if coords and board.is_empty(*coords):
            self._draw_stone(*coords, player_color, alpha=128)

    def pump(self, snapshot):
        """Keep the window alive while the AI thinks."""
        pygame = self._pygame
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                raise EOFError("Window closed")
        self.render(snapshot)
        pygame.time.delay(10)

    def wait_for_move(self, board, player_color):
        pygame = self._pygame
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise EOFError("Window closed")
                if event.type == pygame.MOUSEBUTTONDOWN:
                    coords = self._get_coords_from_mouse(event.pos)
                    if coords:
                        return coords

            if self._last_snapshot is not None:
                self.render(self._last_snapshot)
            self._draw_hover_marker(board, player_color)
            pygame.display.flip()

            pygame.time.delay(10)

    def close(self):
        self._pygame.quit()
