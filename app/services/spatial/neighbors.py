"""Neighbor resolvers for spatial analysis.

Each factory returns a callable ``(unit, units) -> neighbors`` that never
includes the unit itself.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence

from loguru import logger

from app.errors import ValidationError
from app.models.spatial import SpatialUnit
from helpers import formulas

NeighborResolver = Callable[[SpatialUnit, Sequence[SpatialUnit]], list[SpatialUnit]]


def _distance(a: SpatialUnit, b: SpatialUnit) -> float:
    return formulas.haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def within_distance(km: float) -> NeighborResolver:
    """Units within ``km`` great-circle kilometres."""
    if km <= 0:
        raise ValidationError(f"Neighbor radius must be positive, got {km}")

    def resolve(unit: SpatialUnit, units: Sequence[SpatialUnit]) -> list[SpatialUnit]:
        return [u for u in units if u.id != unit.id and _distance(unit, u) <= km]

    return resolve


def k_nearest(k: int) -> NeighborResolver:
    """The ``k`` closest units."""
    if k < 1:
        raise ValidationError(f"k must be at least 1, got {k}")

    def resolve(unit: SpatialUnit, units: Sequence[SpatialUnit]) -> list[SpatialUnit]:
        others = [u for u in units if u.id != unit.id]
        return sorted(others, key=lambda u: _distance(unit, u))[:k]

    return resolve


def adjacency(mapping: Mapping[str, Iterable[str]]) -> NeighborResolver:
    """Explicit neighbor lists keyed by unit id. Unknown ids are ignored."""
    neighbor_ids = {key: set(ids) for key, ids in mapping.items()}

    def resolve(unit: SpatialUnit, units: Sequence[SpatialUnit]) -> list[SpatialUnit]:
        wanted = neighbor_ids.get(unit.id, set()) - {unit.id}
        found = [u for u in units if u.id in wanted]
        if len(found) < len(wanted):
            logger.debug("Unit {}: {} adjacent ids not in batch", unit.id, len(wanted) - len(found))
        return found

    return resolve
