"""Allow running the CLI with ``python -m media_stats.cli``."""

from .main import main

if __name__ == "__main__":
    main()
