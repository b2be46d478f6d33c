"""Core Layer — pure logic, no IO, no network.

Invariants:
    - No module in core/ imports from services/ or infrastructure/
    - Signing and normalization functions are pure and deterministic given their inputs

Design Decisions:
    - Functional core separated from imperative shell (httpx lives in infrastructure/)
"""
