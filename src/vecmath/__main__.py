"""CLI entrypoint: print the version and the numeric configuration."""

from __future__ import annotations

from . import __version__
from .config import active_config, describe


def main() -> int:
    print(f"vecmath v{__version__}")
    for key, value in describe(active_config()).items():
        print(f"{key}: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
