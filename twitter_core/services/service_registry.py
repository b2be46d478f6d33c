"""Service Registry — type-keyed, create-once cache of service instances.

Invariants:
    - For one registry and one service type, exactly one instance is ever retained
      and every caller receives that instance (identity-equal)
    - Entries are never overwritten or removed; lifetime = registry lifetime
    - The cached path takes no lock: a plain dict read
    - Factory errors propagate and leave no entry behind

Algorithm (get):
    1. look up the type; present -> return it
    2. build a candidate with the factory (outside any lock)
    3. dict.setdefault(type, candidate): atomic insert-if-absent
    4. return whatever is stored — the candidate, or a concurrent winner's

Design Decisions:
    - Optimistic construction over a creation lock: racing threads may each build a
      candidate, losers are discarded. Service construction is pure (no I/O, no side
      effects) and instances of one type are interchangeable
    - dict.setdefault is a single atomic operation for type keys (C-level hash/eq);
      the free-threaded build locks the dict per operation, so the guarantee holds there too
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


class ServiceRegistry:
    """Lazy per-type singleton cache in front of a service factory."""

    def __init__(self, factory: Callable[[type], Any]):
        self._factory = factory
        self._services: dict[type, Any] = {}

    def get(self, service_type: type[T]) -> T:
        service = self._services.get(service_type, _MISSING)
        if service is not _MISSING:
            return service

        candidate = self._factory(service_type)
        service = self._services.setdefault(service_type, candidate)
        if service is candidate:
            logger.debug(
                f"Registered {service_type.__name__}",
                extra={"service": service_type.__name__},
            )
        return service

    def __contains__(self, service_type: object) -> bool:
        return service_type in self._services

    def __len__(self) -> int:
        return len(self._services)
