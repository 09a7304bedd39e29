"""
Persistence layer.

``ProductRepository`` defines what the service layer needs from
storage; ``SQLiteProductRepository`` is the implementation used by the
application.
"""
