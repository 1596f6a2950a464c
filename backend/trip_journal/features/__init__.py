"""
Feature modules for Trip Journal.

Each feature is a self-contained module with:
- models.py - dataclasses
- schemas.py - Pydantic schemas
- service.py - Business logic
- client.py - Data access (optional)
"""
