"""
PNG frame rendering for the game board.

Renders the same cell markers the browser grid uses:
- Board with grid lines
- Player, food and snake segment cells
- Score and status banner
"""

import io
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.constants import CELL_FOOD, CELL_PLAYER, CELL_SNAKE, GAME_OVER
from domain.game_state import GameState
from domain.renderer import render_rows

CELL_SIZE = 20  # Size of each grid cell in pixels
BANNER_HEIGHT = 32


class ColorScheme:
    """Color configuration matching the browser stylesheet"""

    BACKGROUND = "#FFFFFF"
    GRID_LINE = "#E5E7EB"
    BORDER = "#646464"

    PLAYER = "#2563EB"
    FOOD = "#EA2014"
    SNAKE = "#4F7022"

    BANNER_BG = "#1A1F2E"
    BANNER_TEXT = "#FFFFFF"
    GAME_OVER_TEXT = "#F87171"


MARKER_COLORS = {
    CELL_PLAYER: ColorScheme.PLAYER,
    CELL_FOOD: ColorScheme.FOOD,
    CELL_SNAKE: ColorScheme.SNAKE,
}


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


class FrameRenderer:
    """Render GameState snapshots to images"""

    def __init__(self, cell_size: int = CELL_SIZE, font: Optional[ImageFont.ImageFont] = None):
        self.cell_size = cell_size
        self.font = font or ImageFont.load_default()

    def image_size(self, state: GameState) -> Tuple[int, int]:
        board_pixels = state.size * self.cell_size
        return board_pixels, board_pixels + BANNER_HEIGHT

    def render(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        width, height = self.image_size(state)
        img = Image.new('RGB', (width, height), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_banner(draw, state, width)
        self._draw_board(draw, state)

        return img

    def to_png_bytes(self, state: GameState) -> bytes:
        buffer = io.BytesIO()
        self.render(state).save(buffer, format="PNG")
        return buffer.getvalue()

    def _draw_banner(self, draw: ImageDraw.ImageDraw, state: GameState, width: int):
        draw.rectangle([0, 0, width, BANNER_HEIGHT], fill=hex_to_rgb(ColorScheme.BANNER_BG))
        draw.text(
            (10, BANNER_HEIGHT // 2 - 6),
            f"Score: {state.score}",
            fill=hex_to_rgb(ColorScheme.BANNER_TEXT),
            font=self.font
        )

        if state.status == GAME_OVER:
            text = "Game Over"
            bbox = draw.textbbox((0, 0), text, font=self.font)
            text_width = bbox[2] - bbox[0]
            draw.text(
                (width - text_width - 10, BANNER_HEIGHT // 2 - 6),
                text,
                fill=hex_to_rgb(ColorScheme.GAME_OVER_TEXT),
                font=self.font
            )

    def _draw_board(self, draw: ImageDraw.ImageDraw, state: GameState):
        """Draw the grid and every occupied cell"""
        size = state.size
        cell = self.cell_size
        top = BANNER_HEIGHT
        board_pixels = size * cell

        # Grid
        for i in range(size + 1):
            draw.line([i * cell, top, i * cell, top + board_pixels], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)
            draw.line([0, top + i * cell, board_pixels, top + i * cell], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)

        for y, row in enumerate(render_rows(state)):
            for x, marker in enumerate(row):
                if marker is None:
                    continue
                self._draw_cell(draw, x * cell, top + y * cell, cell, hex_to_rgb(MARKER_COLORS[marker]))

        # Snake heads are drawn darker so the heading is readable
        for snake in state.snakes:
            head = snake.head
            if head.in_bounds(size):
                self._draw_cell(
                    draw,
                    head.x * cell,
                    top + head.y * cell,
                    cell,
                    darken_color(ColorScheme.SNAKE, 0.3)
                )

        draw.rectangle([0, top, board_pixels - 1, top + board_pixels - 1], outline=hex_to_rgb(ColorScheme.BORDER), width=2)

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        size: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        draw.rectangle(
            [x + padding, y + padding, x + size - padding - 1, y + size - padding - 1],
            fill=color
        )
