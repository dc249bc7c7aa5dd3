"""Entry point for running fslink as a module."""

from fslink.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
