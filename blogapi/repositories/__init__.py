"""
Persistence adapters.

Services depend on the ``Store`` protocol (load/save/transaction) rather than
touching the JSON file directly, so an in-memory or database-backed store can
be swapped in.
"""
