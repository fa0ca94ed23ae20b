# src/park_locator/schemas/__init__.py
"""Pydantic schemas for API request and response bodies."""
