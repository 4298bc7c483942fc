"""Allow ``python -m container_panel``."""

from container_panel.cli import main

if __name__ == "__main__":
    main()
