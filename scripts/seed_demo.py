"""
Seed demo pubs with tap list, bottle list and food menu.

The Italian catalog is loaded first, since demo taps reference its beers.
Pubs that already exist by name are skipped.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from scripts._runner import seed


def main():
    stats = seed("demo")
    return 1 if stats["errors"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
