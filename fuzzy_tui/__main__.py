"""Allow running as ``python -m fuzzy_tui``."""

from .cli import main

if __name__ == "__main__":
    main()
