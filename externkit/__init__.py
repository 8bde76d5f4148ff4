"""Project management tool: per-project environment variables, a SQLite client, pip bootstrapping and a terminal text editor."""

__version__ = "0.1.0"