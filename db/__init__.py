"""
db/ - Database Layer
====================
Handles all PostgreSQL connections, schema initialization and the typed
errors raised by the data access layer.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
