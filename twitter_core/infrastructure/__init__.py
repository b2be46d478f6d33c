"""Infrastructure Layer — httpx transport, JSON codec, call execution, logging.

Invariants:
    - Only this layer talks to the network
    - Every httpx failure mapped to a core/errors.py type before leaving the layer

Design Decisions:
    - Thin wrappers over httpx and pydantic: they stay swappable and testable with
      httpx.MockTransport
"""
