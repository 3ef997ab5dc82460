"""
Text rendering of the field.
"""

from typing import List

from .field import Field, Tile
from .settings import (EMPTY_GLYPH, FOOD_GLYPH, GAME_OVER_TEXT, RESTART_HINT,
                       SNAKE_GLYPH)
from .terminal import Terminal


GLYPHS = {
    Tile.EMPTY: EMPTY_GLYPH,
    Tile.SNAKE: SNAKE_GLYPH,
    Tile.FOOD: FOOD_GLYPH,
}


class FieldRenderer:
    def __init__(self, terminal: Terminal):
        self.terminal = terminal

    @staticmethod
    def frame(field: Field) -> List[str]:
        """One string per field row, one glyph per tile."""
        return ["".join(GLYPHS[tile] for tile in row) for row in field.rows_of_tiles()]

    def draw(self, field: Field):
        """Redraw the whole field and push it to the screen in one flush."""
        term = self.terminal
        term.clear_screen()
        for line in self.frame(field):
            term.write_str(line)
            term.move_cursor_down(1)
            term.clear_line()
        term.flush()

    def draw_game_over(self, field: Field):
        """Overlay the game over message on the last frame."""
        term = self.terminal
        term.move_cursor_to(max(0, (field.cols - len(GAME_OVER_TEXT)) // 2), field.rows // 2)
        term.write_str(GAME_OVER_TEXT)
        term.move_cursor_to(0, field.rows)
        term.clear_line()
        term.write_str(RESTART_HINT)
        term.flush()
