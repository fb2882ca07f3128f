"""Allow ``python -m copycat``."""

from copycat.cli import main

if __name__ == "__main__":
    main()
