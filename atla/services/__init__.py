"""Services package — all business logic lives here, never in routers.

Files:
  character.py  — REFERENCE service pattern (copy when adding new entities)
  episode.py    — Episodes and character appearances
  quote.py      — Quotes and their speakers

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
