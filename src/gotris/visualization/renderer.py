from __future__ import annotations

import pygame

from gotris.game import BOARD_HEIGHT, BOARD_WIDTH, Field, TileColor
from .palette import color_for_value


class Renderer:
    """Draws a field through its cell callbacks: board on the left, side panel on the right."""

    def __init__(self, cell_size: int = 28, margin: int = 20, panel_cells: int = 6) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_w = panel_cells * cell_size
        self._font = None

    def window_size(self) -> tuple[int, int]:
        width = self.margin * 3 + BOARD_WIDTH * self.cell_size + self.panel_w
        height = self.margin * 2 + BOARD_HEIGHT * self.cell_size
        return width, height

    def _font_obj(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 26)
        return self._font

    def _cell_drawer(self, surf: pygame.Surface, x0: int, y0: int, skip_empty: bool = False):
        def draw(row: int, col: int, is_row_end: bool, color: TileColor) -> None:
            if skip_empty and color == TileColor.TRANSPARENT:
                return
            rect = pygame.Rect(
                x0 + col * self.cell_size,
                y0 + row * self.cell_size,
                self.cell_size - 1,
                self.cell_size - 1,
            )
            pygame.draw.rect(surf, color_for_value(int(color)), rect)

        return draw

    def draw(self, screen: pygame.Surface, field: Field, message: str = "") -> None:
        screen.fill((10, 10, 14))
        field.render_board(self._cell_drawer(screen, self.margin, self.margin))

        panel_x = self.margin * 2 + BOARD_WIDTH * self.cell_size
        font = self._font_obj()
        screen.blit(font.render("Next", True, (230, 230, 230)), (panel_x, self.margin))
        field.render_preview(self._cell_drawer(screen, panel_x, self.margin + 24, skip_empty=True))

        text_y = self.margin + 24 + 5 * self.cell_size
        info_lines = [
            f"Score: {field.display_score()}",
            f"Level: {field.level()}",
            f"Lines: {field.lines_cleared_total}",
        ]
        for i, txt in enumerate(info_lines):
            screen.blit(font.render(txt, True, (230, 230, 230)), (panel_x, text_y + i * 22))

        if message:
            over = font.render(message, True, (255, 100, 100))
            rect = over.get_rect(center=(screen.get_width() // 2, self.margin // 2 + 2))
            screen.blit(over, rect)
        pygame.display.flip()
