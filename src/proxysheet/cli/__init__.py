from .common import (
    ProgressPrinter,
    exit_with_message,
    resolve_output_path,
)

from .handlers import (
    handle_lookup,
    handle_sheet,
)

__all__ = [
    "ProgressPrinter",
    "exit_with_message",
    "resolve_output_path",
    "handle_lookup",
    "handle_sheet",
]
