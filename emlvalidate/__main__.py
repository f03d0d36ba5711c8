# emlvalidate/__main__.py
"""Entry point for running as `python -m emlvalidate`."""

from emlvalidate.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
