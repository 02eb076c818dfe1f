# File: src/combodrill/managers/display_manager.py
"""Terminal rendering for combo rounds using blessed."""

import sys

from combodrill.utilities.logger import DrillLogger
from combodrill.utilities.symbols import Symbols

ARROW_GAP = "   "

# Raw mode turns off output post-processing, so line feeds need their own CR
NEWLINE = "\r\n"


def render_arrows(sequence, index=None):
    """Lay the glyphs of a sequence side by side.

    The symbol at ``index`` is wrapped in >> << markers; the others are padded
    so columns do not shift as the cursor moves. Returns a list of text rows.
    """
    rows = [""] * Symbols.ART_ROWS
    for i, symbol in enumerate(sequence):
        parts = symbol.art.split("\n")
        for row in range(Symbols.ART_ROWS):
            if i == index:
                rows[row] += ">>" + parts[row] + "<<" + ARROW_GAP
            else:
                rows[row] += "  " + parts[row] + "  " + ARROW_GAP
    return [row.rstrip() for row in rows]


class DisplayManager:
    """Draws round state to a blessed Terminal.

    Every call redraws from the home position; the engine never reads
    anything back.
    """

    def __init__(self, term, stream=None):
        DrillLogger.info("DISP", "[INIT] DisplayManager")
        self.term = term
        self.stream = stream if stream is not None else sys.stdout
        self._feedback_row = 0

    def _write(self, text):
        print(text, end="", file=self.stream, flush=True)

    def clear(self):
        self._write(self.term.home + self.term.clear)

    def _draw(self, header_lines, sequence, index):
        lines = list(header_lines)
        for row in render_arrows(sequence, index):
            lines.append(row)
        lines.append("")
        self._feedback_row = len(lines)
        self._write(self.term.home + self.term.clear + NEWLINE.join(lines) + NEWLINE)

    def show_round(self, title, score, sequence, index):
        """Untimed round: title, score and the arrows with the current one marked."""
        self._draw(
            [f"Action: {title}", f"Current Score: {score}"],
            sequence,
            index,
        )

    def show_timed(self, title, score, sequence, index, remaining_ms, elapsed_ms):
        """Timed round: as show_round plus the countdown and the combo clock."""
        self._draw(
            [
                f"Action: {title}",
                f"Current Score: {score}",
                f"Overall Time Remaining: {max(remaining_ms, 0) / 1000:.1f} seconds",
                f"Combo Time Elapsed: {elapsed_ms / 1000:.2f} seconds",
            ],
            sequence,
            index,
        )

    def show_feedback(self, text):
        """One-line reaction to the last key, written under the arrows."""
        self._write(self.term.move_xy(0, self._feedback_row) + self.term.clear_eol + text)

    def show_message(self, text):
        """Free-standing status line (mode banners, early exit notices)."""
        self._write(text + NEWLINE)
