from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def _is_terminal(stream) -> bool:
    try:
        return stream.isatty()  # type: ignore[call-arg]
    except Exception:
        return False


@dataclass
class ProgressPrinter:
    """One status line for a batch lookup, rewritten in place on a terminal.

    When the stream is not a terminal only final lines are written, so piped
    output gets the closing summary and nothing else.
    """

    stream: Any = field(default_factory=lambda: sys.stderr)
    enabled: bool = field(default_factory=lambda: _is_terminal(sys.stderr))
    keep_history: bool = False
    history: list[str] = field(default_factory=list, init=False)
    _width: int = field(default=0, init=False)

    def _emit(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def update(self, label: str, *, final: bool = False) -> None:
        if self.keep_history:
            self.history.append(label)

        if not self.enabled:
            if final:
                self._emit(label + os.linesep)
            return

        # pad over the tail of a longer previous line
        line = "\r" + label.ljust(self._width)
        self._width = 0 if final else len(label)
        self._emit(line + (os.linesep if final else ""))

    def close(self, label: str | None = None) -> None:
        """End the status line; a no-op when nothing is pending."""
        if label is None and not self._width:
            return
        self.update(label or "", final=True)


def resolve_output_path(path_value: str | Path | None, default: str) -> Path:
    return Path(path_value or default).expanduser().resolve()


def exit_with_message(message: str, *, code: int = 0) -> None:
    stream = sys.stderr if code else sys.stdout
    stream.write(message + os.linesep)
    stream.flush()
    raise SystemExit(code)
