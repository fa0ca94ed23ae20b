# src/park_locator/init_db.py
"""Create all tables on the configured database for local development."""

from park_locator.core.settings import settings
from park_locator.db.session import create_tables


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()


if __name__ == "__main__":
    init_db()
    print(f"Database initialized at {settings.effective_database_url}.")
