"""Module entrypoint for ``python -m oxls``."""

from .cli import main


if __name__ == "__main__":
    main()
