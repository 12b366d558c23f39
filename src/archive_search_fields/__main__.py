"""Module entry point for `python -m archive_search_fields`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
