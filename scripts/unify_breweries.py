"""
Merge duplicate breweries ("Birrificio Baladin" / "Baladin (Piozzo)" / "Baladin").

Use --dry-run to list the groups that would be merged without changing anything.
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from scripts._runner import SessionLocal, init_db, print_stats, setup_logging
from fermentato.services.brewery_unify import find_duplicate_groups, unify_breweries


def main():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--dry-run", action="store_true", help="Only list duplicate groups")
    args = parser.parse_args()

    setup_logging()
    init_db()
    db = SessionLocal()
    try:
        groups = find_duplicate_groups(db)
        if not groups:
            print("No duplicate breweries found.")
            return 0
        for group in groups:
            print(" <- ".join(b.name for b in group))
        if args.dry_run:
            print(f"{len(groups)} group(s) would be merged.")
            return 0
        stats = unify_breweries(db)
    finally:
        db.close()
    print("Unification complete.")
    print_stats(stats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
