from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

from gotris.game import Action, Field, GameConfig, TileColor, apply_action, parse_action

logger = logging.getLogger(__name__)


def controls() -> str:
    return (
        "Debug Mode\n"
        "\nAbout\n"
        "  This mode is a basic text-mode written for debugging the game.\n"
        "  It needs nothing beyond the standard terminal.\n"
        "\nControls\n"
        "  * W:       Rotate\n"
        "  * A:       Move left\n"
        "  * D:       Move right\n"
        "  * S:       Move down\n"
        "  * [Space]: Drop tile to floor\n"
        "  * E:       Exit game\n"
    )


def draw_field(field: Field) -> str:
    """Board as text, two characters per cell so it looks roughly square."""
    parts: List[str] = []

    def cell(row: int, col: int, is_row_end: bool, color: TileColor) -> None:
        parts.append("00" if color == TileColor.TRANSPARENT else "11")
        if is_row_end:
            parts.append("\n")

    field.render_board(cell)
    return "".join(parts)


def play(field: Field, stdin: TextIO, stdout: TextIO) -> bool:
    """Run one game; returns False if the player quit before it ended."""
    while True:
        _, game_over = field.advance()

        stdout.write(f"Score:  {field.display_score()}\n")
        stdout.write("-" * 20 + "\n")
        stdout.write(draw_field(field))
        if game_over:
            stdout.write("Game over!\n")
            return True

        stdout.write("Next move (w/a/s/d/ /e): ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            return False
        action = parse_action(line)
        if action == Action.EXIT:
            return False
        apply_action(field, action)


def run(config: Optional[GameConfig] = None, stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None) -> None:
    config = config or GameConfig()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    try:
        while play(Field(config), stdin, stdout):
            stdout.write("Play again? (y/n): ")
            stdout.flush()
            if stdin.readline().strip().lower() not in ("y", "yes"):
                break
    except KeyboardInterrupt:
        logger.info("interrupted")
        stdout.write("\n")


if __name__ == "__main__":  # pragma: no cover
    run()
