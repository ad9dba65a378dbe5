"""
Reset the trainer database.

DANGEROUS: This deletes all sentences and progress!
Only use when you want to start fresh for testing.

Usage:
    python -m scripts.maintenance.reset_learning_db
"""

from dotenv import load_dotenv
from sqlalchemy.engine import make_url

from core import store

load_dotenv()


def main():
    print("=" * 60)
    print("WARNING: Reset Trainer Database")
    print("=" * 60)
    print()
    print(f"Database: {make_url(store.get_database_url())}")
    print("This will DELETE everything in the trainer_state table:")
    print("  - All imported sentences")
    print("  - All progress (ease, intervals, streaks)")
    print("  - XP, daily goal and level")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() == "yes":
        print("\nResetting database...")
        store.reset_db()
        print("✓ Database reset complete!")
        print("\nThe database now has an empty trainer_state table.")
    else:
        print("\nCancelled. No changes made.")


if __name__ == "__main__":
    main()
