"""Module entrypoint for ``python -m millerview``.

Argument parsing and runtime setup happen in ``millerview.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
