"""
API package containing versioned routes.

A version subpackage exposes a top‑level ``router`` which includes all
of its endpoints.  New versions can be added as sibling subpackages
(e.g. ``v2``) with their own ``router``.
"""
