"""Console reporting for the pre-commit guard."""

import os
import shlex
import sys
from typing import TextIO

from stageguard.core.settings import ColorMode
from stageguard.scan.types import MatchResult

RED = "\033[91m"
YELLOW = "\033[93m"
BOLD = "\033[1m"
RESET = "\033[0m"

HEADER = "⛔  Potential Security Risk: Sensitive files are staged!"
HINT = (
    "❗ Please unstage or remove these files from the commit "
    "to avoid leaking sensitive information."
)
ENVIRONMENT_ERROR = "Error: Not a git repository or git is not installed."


def use_color(mode: ColorMode, stream: TextIO) -> bool:
    """Decide whether ANSI codes should be written to ``stream``."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Reporter:
    """Writes guard results to the console."""

    def __init__(
        self,
        color: ColorMode = "auto",
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self._color_out = use_color(color, self.out)
        self._color_err = use_color(color, self.err)

    @staticmethod
    def _paint(text: str, style: str, enabled: bool) -> str:
        return f"{style}{text}{RESET}" if enabled else text

    @staticmethod
    def _emit(text: str, stream: TextIO) -> None:
        """Print ``text``, replacing characters the stream cannot encode."""
        encoding = getattr(stream, "encoding", None) or "utf-8"
        safe = text.encode(encoding, errors="replace").decode(encoding)
        print(safe, file=stream)

    def matches(self, matches: list[MatchResult], show_patterns: bool = False) -> None:
        """Print the blocked-commit listing. Prints nothing for no matches."""
        if not matches:
            return

        self._emit(self._paint(HEADER, BOLD + RED, self._color_out), self.out)
        for match in matches:
            line = f" - {match.path}"
            if show_patterns:
                line += f" (matches {match.pattern})"
            self._emit(self._paint(line, RED, self._color_out), self.out)

        self._emit("", self.out)
        self._emit(self._paint(HINT, YELLOW, self._color_out), self.out)
        paths = " ".join(shlex.quote(m.path) for m in matches)
        self._emit(f"   git restore --staged {paths}", self.out)

    def environment_error(self, detail: str = "") -> None:
        """Print the fatal status-read error."""
        self._emit(self._paint(ENVIRONMENT_ERROR, RED, self._color_err), self.err)
        if detail:
            self._emit(f"  {detail}", self.err)

    def summary(self, total: int, staged: int, flagged: int) -> None:
        """Print a verbose scan summary to stderr."""
        self._emit("Scanning staged files for sensitive names...", self.err)
        self._emit(f"  Status entries: {total}", self.err)
        self._emit(f"  Added/modified: {staged}", self.err)
        self._emit(f"  Flagged: {flagged}", self.err)
