"""
Endpoint subpackage for API v1.

Each module defines an APIRouter that is included by ``router.py``.
"""
