"""Run script.

Why it exists:
- Allows `python -m main` from inside `src/` during development.
- Keeps a simple entrypoint next to the `build-identity` console script.
"""

from __future__ import annotations

import sys

# Windows CI runners default to cp1252 for piped output.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
