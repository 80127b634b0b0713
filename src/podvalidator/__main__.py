"""Module entrypoint for ``python -m podvalidator``."""

from podvalidator.cli import main

if __name__ == "__main__":
    main()
