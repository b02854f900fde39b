"""
db/ - Database Layer
====================
Handles PostgreSQL connection pools and schema initialization.
This layer is the lowest in the architecture; it depends only on config, the logger
and the shared error types.
"""
