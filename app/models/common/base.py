"""Base entity class for all analysis records."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class BaseEntity:
    """Base class for all entities. Records are immutable once produced."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to a JSON-friendly dictionary."""
        return _plain(asdict(self))
