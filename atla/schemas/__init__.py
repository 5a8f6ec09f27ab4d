"""Pydantic schemas package.

Folder intent:
  common.py     — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  character.py  — REFERENCE pattern (copy when adding new entities)
  episode.py    — Episode DTOs
  quote.py      — Quote DTOs
  relations.py  — Composite responses for /characters/{id}/quotes and friends
"""
