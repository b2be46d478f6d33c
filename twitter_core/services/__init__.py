"""Services Layer — declared Twitter service interfaces, registry and client façade.

Invariants:
    - Each define_*_service.py declares one ApiService subclass, nothing else
    - TwitterApiClient is the only way callers obtain service instances

Design Decisions:
    - Explicit imports per service: no auto-discovery
"""
