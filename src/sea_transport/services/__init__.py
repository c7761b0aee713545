"""
sea_transport.services

Service layer package.

Responsibilities:
- Own transaction boundaries (commit after writes).
- Delegate reads and writes to the entity repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services hold no HTTP knowledge; routers translate results into responses.
