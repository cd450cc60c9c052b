"""Logging configuration (Rich handler on stderr).

stdout stays reserved for the identity itself (env lines / JSON), so logs never
end up in a captured `$GITHUB_ENV` or piped output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the root logger once; safe to call again (handlers replaced)."""

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))

    # Replace only our own handler; others (e.g. test capture) stay attached.
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    return root
