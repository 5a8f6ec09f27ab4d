"""v1 router package — all /api/v1/* endpoints live here.

Files:
  characters.py  — REFERENCE router pattern (copy when adding new entities)
  episodes.py    — Episodes and their cast
  quotes.py      — Quotes and their speakers

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to atla/services/.
"""
