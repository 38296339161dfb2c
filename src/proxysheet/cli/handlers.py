"""CLI command handlers.

Each handler is a plain function that takes parameters and returns a Result.
The click commands in cli.main are thin wrappers that print the outcome.
"""

from pathlib import Path
from typing import Callable, Optional

from proxysheet.lookup import LookupClient
from proxysheet.render import write_sheet
from proxysheet.result import Result, failure, try_operation
from proxysheet.session import ProxySession


def handle_lookup(lookup: LookupClient, name: str) -> Result:
    """Handle single card lookup command.

    Args:
        lookup: Lookup client to query
        name: Free text card name

    Returns:
        Result containing the query and the resolved records
    """

    def run_lookup():
        records = lookup.lookup_one(name)
        return {"query": name.strip(), "cards": records}

    return try_operation(run_lookup)


def handle_sheet(
    session: ProxySession,
    names_text: str,
    out_path: Path,
    on_progress: Optional[Callable[[int, int, str], None]] = None,
) -> Result:
    """Handle proxy sheet build command.

    Looks every name up in order, then writes the collected cards as a
    printable HTML sheet. Lines that fail are reported, not fatal.

    Args:
        session: Session collecting the cards
        names_text: Newline-separated card names
        out_path: Where to write the sheet
        on_progress: Called as (done, total, name) after each lookup

    Returns:
        Result containing the sheet path, card count and failure messages
    """

    def report(done: int, total: int, outcome) -> None:
        if on_progress is not None:
            on_progress(done, total, outcome.query)

    outcomes = session.add_list(names_text, on_outcome=report)
    errors = [outcome.error for outcome in outcomes if outcome.error]
    if not session.count():
        return failure(ValueError("; ".join(errors) or "No cards collected"))

    def build_sheet():
        path = write_sheet(session.collection, out_path, auto_print=True)
        return {"path": path, "count": session.count(), "errors": errors}

    return try_operation(build_sheet)
