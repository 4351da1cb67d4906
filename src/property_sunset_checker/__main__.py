"""Module entry point for `python -m property_sunset_checker`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
