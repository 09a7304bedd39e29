"""
Application package initializer.

The API manages a single resource, products.  The code is split into
layers: ``schemas`` define the wire shapes, ``services`` hold the
business rules, ``repositories`` talk to the database and
``api/v1/endpoints`` expose the HTTP routes.
"""

from .main import app  # noqa: F401
