"""Package entry point.

Preferred invocation is via the installed console script:

    supp-figures ...

For convenience we also support:

    python -m supplementary_figures ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m supplementary_figures`."""

    app()


if __name__ == "__main__":
    main()
