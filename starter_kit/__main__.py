"""Allow ``python -m starter_kit``."""

from starter_kit.cli import main

if __name__ == "__main__":
    main()
