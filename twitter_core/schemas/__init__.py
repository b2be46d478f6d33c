"""Payload Schemas — pydantic models for Twitter API responses.

Invariants:
    - Every payload model derives from TwitterModel (null/absent collections -> empty)
    - Unknown fields ignored: new API fields never break decoding
"""
