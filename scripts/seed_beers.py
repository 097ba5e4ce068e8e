"""Seed the Italian craft brewery and beer catalog. Safe to run more than once."""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from scripts._runner import seed


def main():
    stats = seed("italian")
    return 1 if stats["errors"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
