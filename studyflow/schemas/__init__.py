"""Pydantic schemas for the persisted collection layout."""
