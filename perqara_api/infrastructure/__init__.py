"""Infrastructure Layer — store access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All store calls map driver failures to StoreError
"""
