"""Adapters for catalog text files, in-memory repositories and local JSON storage."""
