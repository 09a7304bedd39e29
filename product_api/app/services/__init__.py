"""
Service layer.

Services encapsulate business rules and depend only on the repository
interface, so the storage backend can be swapped without touching the
API handlers.
"""
