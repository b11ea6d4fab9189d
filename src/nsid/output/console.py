"""Rich Console factory and theme for nsid output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NSID_THEME = Theme(
    {
        "nsid.ok": "bold green",
        "nsid.error": "bold red",
        "nsid.warning": "bold yellow",
        "nsid.op": "bold cyan",
        "nsid.key": "dim",
        "nsid.id": "bold blue",
        "nsid.namespace": "magenta",
        "nsid.date": "green",
        "nsid.hex": "dim cyan",
    }
)

_FIELD_STYLES: dict[str, str] = {
    "id": "nsid.id",
    "left": "nsid.id",
    "right": "nsid.id",
    "namespace": "nsid.namespace",
    "date": "nsid.date",
    "payload": "nsid.hex",
    "raw": "nsid.hex",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=NSID_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_field(key: str) -> str:
    """Return the Rich style name for a result data key."""
    return _FIELD_STYLES.get(key, "")
