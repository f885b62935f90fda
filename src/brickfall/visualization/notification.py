from __future__ import annotations

from typing import Optional

from brickfall.game import DownData


class ScoreNotification:
    """Short-lived "+bonus" text shown after a line clear."""

    def __init__(self, duration_ms: int = 1000) -> None:
        self.duration_ms = duration_ms
        self._text: Optional[str] = None
        self._shown_at = 0

    def observe(self, result: object, now_ms: int) -> None:
        if not isinstance(result, DownData) or result.clear_row is None:
            return
        if result.clear_row.lines_removed > 0:
            self._text = f"+{result.clear_row.score_bonus}"
            self._shown_at = now_ms

    def text(self, now_ms: int) -> Optional[str]:
        if self._text is not None and now_ms - self._shown_at >= self.duration_ms:
            self._text = None
        return self._text

    def clear(self) -> None:
        self._text = None
