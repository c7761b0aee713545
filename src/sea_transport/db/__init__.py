"""
sea_transport.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers and services only see repositories; swapping the database backend is
# a settings change (`database_url`) plus the matching async driver.
