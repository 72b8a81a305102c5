"""
Terminal adapter: renders snapshots as text and parses typed commands.

Commands:
    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    n           start a new game
    q           quit
"""
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .game import Game, Snapshot
from .session import GameStatus


# ============================================================================
# Rendering
# ============================================================================

HIDDEN_SYMBOL = "."
FLAG_SYMBOL = "F"
MINE_SYMBOL = "*"
EMPTY_SYMBOL = " "

STATUS_TEXT = {
    GameStatus.PLAYING: "Playing",
    GameStatus.WON: "Won!",
    GameStatus.LOST: "Lost!",
}


def render_board(snapshot: Snapshot) -> str:
    """Render the board as rows of symbols with row and column labels."""
    label_width = len(str(snapshot.rows - 1))
    col_width = len(str(snapshot.cols - 1))
    header = " " * (label_width + 1) + " ".join(
        str(col).rjust(col_width) for col in range(snapshot.cols)
    )
    lines = [header]
    for row, cells in enumerate(snapshot.cells):
        symbols = " ".join(_symbol(cell).rjust(col_width) for cell in cells)
        lines.append(f"{str(row).rjust(label_width)} {symbols}")
    return "\n".join(lines)


def _symbol(cell) -> str:
    if not cell.is_revealed:
        return FLAG_SYMBOL if cell.is_flagged else HIDDEN_SYMBOL
    if cell.is_mine:
        return MINE_SYMBOL
    if cell.neighbor_mine_count == 0:
        return EMPTY_SYMBOL
    return str(cell.neighbor_mine_count)


def render_status(snapshot: Snapshot) -> str:
    return (
        f"{STATUS_TEXT[snapshot.status]} | "
        f"Flags: {snapshot.flags_remaining} | "
        f"Time: {snapshot.elapsed_seconds}s"
    )


def render(snapshot: Snapshot) -> str:
    return render_status(snapshot) + "\n" + render_board(snapshot)


# ============================================================================
# Command Parsing
# ============================================================================

@dataclass(frozen=True)
class Command:
    """A parsed player command."""

    action: str
    row: int = 0
    col: int = 0


ACTIONS = {
    "r": "reveal",
    "reveal": "reveal",
    "f": "flag",
    "flag": "flag",
    "n": "new",
    "new": "new",
    "q": "quit",
    "quit": "quit",
}


def parse_command(text: str) -> Optional[Command]:
    """
    Parse a line typed by the player.

    Returns:
        The command, or None if the line is not understood.
    """
    parts = text.strip().lower().split()
    if not parts or parts[0] not in ACTIONS:
        return None
    action = ACTIONS[parts[0]]
    if action in ("new", "quit"):
        return Command(action) if len(parts) == 1 else None
    if len(parts) != 3:
        return None
    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        return None
    return Command(action, row, col)


# ============================================================================
# Clock
# ============================================================================

class TickClock:
    """
    Delivers Game.tick() once per wall-clock second.

    The terminal loop blocks on input, so instead of a timer thread the
    clock catches up on the seconds that passed whenever it is polled.
    """

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self._now = now
        self._last = now()

    def restart(self) -> None:
        self._last = self._now()

    def catch_up(self, game: Game) -> int:
        """Tick the game for every whole second since the last poll."""
        elapsed = int(self._now() - self._last)
        for _ in range(elapsed):
            game.tick()
        self._last += elapsed
        return elapsed
