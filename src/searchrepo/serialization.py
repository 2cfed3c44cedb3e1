"""Entity deserialization — Maps raw hit payloads to typed entities.

The entity type is passed explicitly when the deserializer is built; it is
never discovered from generic parameters at runtime.  Any type pydantic can
validate works: ``BaseModel`` subclasses, dataclasses, ``TypedDict`` and
plain containers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from searchrepo.repository.exceptions import DeserializationError

T = TypeVar("T")


class EntityDeserializer(Generic[T]):
    """Deserialize source payloads into instances of *entity_type*.

    Accepts either a JSON string/bytes (the serialized ``_source``) or an
    already-decoded mapping, which is what ``opensearch-py`` hands back.

    Args:
        entity_type: Target type for every payload.
        strict: Disable pydantic's lax type coercion.
    """

    def __init__(self, entity_type: type[T], *, strict: bool = False) -> None:
        self._entity_type = entity_type
        self._adapter: TypeAdapter[T] = TypeAdapter(entity_type)
        self._strict = strict

    @property
    def entity_type(self) -> type[T]:
        return self._entity_type

    def __call__(self, payload: str | bytes | Mapping[str, Any]) -> T:
        try:
            if isinstance(payload, (str, bytes, bytearray)):
                return self._adapter.validate_json(payload, strict=self._strict)
            return self._adapter.validate_python(payload, strict=self._strict)
        except ValidationError as e:
            raise DeserializationError(
                f"Cannot map payload to {getattr(self._entity_type, '__name__', self._entity_type)}: {e}"
            ) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}({getattr(self._entity_type, '__name__', self._entity_type)!r})"
