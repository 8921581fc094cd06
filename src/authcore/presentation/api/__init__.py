"""FastAPI request layer for account operations."""
