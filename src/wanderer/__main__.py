"""Entry point for 'python -m wanderer' command."""

from wanderer.cli import main

if __name__ == "__main__":
    main()
