"""
GoTrue Client JSON Converters

Maps raw response bodies to the typed records in ``gotrue.types``.
"""

import json
from typing import Any, Dict, Protocol, Type, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class GoTrueJsonConverter(Protocol):
    """Converter interface for custom implementations."""

    def deserialize(self, body: str, target_type: Type[T]) -> T:
        """Deserialize ``body`` into an instance of ``target_type``."""
        ...


class DataclassJsonConverter:
    """
    Default converter.

    Decodes the body with ``json.loads`` and hands the resulting mapping to
    ``target_type.from_dict``. Decoding and schema errors propagate.
    """

    def deserialize(self, body: str, target_type: Type[T]) -> T:
        data: Dict[str, Any] = json.loads(body)
        if not isinstance(data, dict):
            raise TypeError(
                f"Expected a JSON object for {target_type.__name__}, got {type(data).__name__}"
            )
        return target_type.from_dict(data)  # type: ignore[attr-defined]
