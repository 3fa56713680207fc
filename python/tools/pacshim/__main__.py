#!/usr/bin/env python3
"""
Main entry point for pacshim.
"""

from __future__ import annotations

import sys
from typing import NoReturn

from .cli import CLI


def main() -> NoReturn:
    """Main entry point for pacshim."""
    try:
        sys.exit(CLI().run())
    except KeyboardInterrupt:
        print("\npacshim: interrupted", file=sys.stderr)
        sys.exit(130)  # Standard exit code for SIGINT
    except Exception as e:
        print(f"pacshim: fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
