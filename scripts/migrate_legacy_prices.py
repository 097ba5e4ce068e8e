"""
Fill the canonical ``prices`` list of tap entries from the legacy
price_small / price_medium / price_large columns.

Entries that already have prices are left alone. Run once after upgrading a
database created before sized prices existed.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from scripts._runner import SessionLocal, init_db, setup_logging
from fermentato.models import TapListEntry
from fermentato.services.pricing import LEGACY_SIZES, normalize_prices


def migrate(db) -> tuple[int, int]:
    """Returns (entries updated, entries without any usable price)."""
    updated = empty = 0
    for entry in db.query(TapListEntry).all():
        if entry.prices:
            continue
        legacy = {field: getattr(entry, field) for field, _ in LEGACY_SIZES}
        prices = normalize_prices(None, legacy)
        if not prices:
            empty += 1
            continue
        entry.prices = prices
        updated += 1
    db.commit()
    return updated, empty


def main():
    setup_logging()
    init_db()
    db = SessionLocal()
    try:
        updated, empty = migrate(db)
    finally:
        db.close()
    print(f"Migrated {updated} tap entries; {empty} had no legacy price.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
