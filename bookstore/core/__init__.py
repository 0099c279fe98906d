"""Core utilities: logging, locking and exceptions."""
