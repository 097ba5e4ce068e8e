"""Shared bootstrap for the maintenance scripts."""
from fermentato.database import SessionLocal, init_db
from fermentato.logging_config import setup_logging
from fermentato.services.seeding import run_dataset


def print_stats(stats: dict) -> None:
    for key, value in stats.items():
        print(f"  {key}: {value}")


def seed(dataset: str) -> dict:
    setup_logging()
    init_db()
    db = SessionLocal()
    try:
        stats = run_dataset(db, dataset)
    finally:
        db.close()
    print(f"Dataset '{dataset}' done.")
    print_stats(stats)
    return stats
