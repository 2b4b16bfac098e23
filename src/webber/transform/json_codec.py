"""
JSON encode/decode for request and response bodies.

Decoding is driven by a runtime type descriptor through pydantic's
``TypeAdapter``, so targets can be pydantic models, dataclasses, TypedDicts,
builtin containers or scalars.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional, Type, TypeVar, Union, get_origin

from pydantic import BaseModel, PydanticUserError, TypeAdapter, ValidationError

from webber.core.errors import UnsupportedResultTypeError

T = TypeVar("T")

DeserializationError = ValidationError


@lru_cache(maxsize=128)
def _cached_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def adapter_for(target: Any) -> TypeAdapter:
    """
    JSON adapter for ``target``.

    Raises:
        UnsupportedResultTypeError: If pydantic cannot build a schema for ``target``.
    """
    try:
        hash(target)
    except TypeError:
        hashable = False
    else:
        hashable = True

    try:
        return _cached_adapter(target) if hashable else TypeAdapter(target)
    except PydanticUserError as exc:
        raise UnsupportedResultTypeError(target) from exc


def from_json(text: str, target: Type[T]) -> T:
    """
    Deserialize ``text`` into an instance of ``target``.

    Raises:
        pydantic.ValidationError: If the text is not valid JSON or does not
            match the shape of ``target``.
        UnsupportedResultTypeError: If ``target`` cannot be built from JSON.
    """
    return adapter_for(target).validate_json(text)


def to_json(obj: Any) -> str:
    """Serialize ``obj`` (model, dataclass, dict, list, scalar) to JSON text."""
    if isinstance(obj, BaseModel):
        return obj.model_dump_json()
    return adapter_for(type(obj)).dump_json(obj).decode("utf-8")


def default_value(target: Any) -> Optional[Any]:
    """
    Zero value of ``target``.

    Pydantic models are built with ``model_construct`` so required fields do
    not need values. Anything else is called without arguments; ``None`` is
    returned when that is not possible.
    """
    if isinstance(target, type) and issubclass(target, BaseModel):
        return target.model_construct()

    origin = get_origin(target)
    if origin is Union:
        return None
    factory = origin or target
    if not callable(factory):
        return None
    try:
        return factory()
    except TypeError:
        return None
