"""tasklist - single-user task list persisted to a flat text file."""

__version__ = "0.1.0"
