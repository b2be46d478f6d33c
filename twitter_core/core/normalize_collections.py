"""Collection Normalization — null/absent list and map fields become empty containers.

Invariants:
    - A field annotated as a sequence type (list, tuple, set, Sequence, ...) whose
      value is null or absent becomes []
    - A field annotated as a mapping type (dict, Mapping, ...) whose value is null
      or absent becomes {}
    - Optional[...] wrappers are looked through: `list[X] | None` is still a list field
    - Non-null values are never touched — type errors stay type errors
    - Input dict is never mutated; a shallow copy is returned when anything changes

Design Decisions:
    - Runs as a dedicated pre-validation step (TwitterModel before-validator) instead of
      per-field defaults: one place, independently testable, no decode logic mixed in
"""

import collections.abc
import types
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel


class CollectionKind:
    SEQUENCE = "sequence"
    MAPPING = "mapping"


_SEQUENCE_ORIGINS = frozenset({
    list, tuple, set, frozenset,
    collections.abc.Sequence, collections.abc.MutableSequence,
    collections.abc.Set, collections.abc.MutableSet,
    collections.abc.Collection, collections.abc.Iterable,
})
_MAPPING_ORIGINS = frozenset({
    dict, collections.abc.Mapping, collections.abc.MutableMapping,
})


def collection_kind(annotation: Any) -> str | None:
    """Return CollectionKind.SEQUENCE / MAPPING for a collection annotation, else None."""
    origin = get_origin(annotation)
    if origin is Annotated:
        return collection_kind(get_args(annotation)[0])
    if origin is Union or origin is types.UnionType:
        kinds = {
            collection_kind(arg) for arg in get_args(annotation)
            if arg is not type(None)
        }
        kinds.discard(None)
        return kinds.pop() if len(kinds) == 1 else None
    if origin is Literal:
        return None
    target = origin or annotation
    if target in _SEQUENCE_ORIGINS:
        return CollectionKind.SEQUENCE
    if target in _MAPPING_ORIGINS:
        return CollectionKind.MAPPING
    return None


def empty_for(kind: str) -> list | dict:
    return [] if kind == CollectionKind.SEQUENCE else {}


def normalize_collections(model_cls: type[BaseModel], data: Any) -> Any:
    """Fill null/absent collection fields of model_cls with empty containers.

    Non-dict input (an already-built model, a scalar) is returned unchanged so
    pydantic reports it the usual way.
    """
    if not isinstance(data, dict):
        return data
    normalized = None
    for name, field_info in model_cls.model_fields.items():
        kind = collection_kind(field_info.annotation)
        if kind is None:
            continue
        keys = [k for k in (field_info.alias, name) if k]
        present = [k for k in keys if k in data]
        if any(data[k] is not None for k in present):
            continue
        if normalized is None:
            normalized = dict(data)
        for key in present or keys[:1]:
            normalized[key] = empty_for(kind)
    return data if normalized is None else normalized
