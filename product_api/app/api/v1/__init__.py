"""
Version 1 of the API.

Breaking changes should go into a new version subpackage to keep
existing clients working.
"""
