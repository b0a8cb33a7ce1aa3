"""Flask and SQLite web service for a football club's users, members and training records."""

__version__ = "0.1.0"