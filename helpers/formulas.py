"""Pure math formulas - no dependencies, easily testable."""
from collections import defaultdict
from collections.abc import Iterable, Sequence
from math import asin, cos, radians, sin, sqrt

# Second-digit Benford frequencies, index = digit
BENFORD_SECOND_DIGIT = (0.1197, 0.1139, 0.1088, 0.1043, 0.1003, 0.0967, 0.0934, 0.0904, 0.0876, 0.0850)

EARTH_RADIUS_KM = 6371.0088


def second_digit(value: int) -> int | None:
    """Second decimal digit of |value|, None for single-digit values."""
    digits = str(abs(int(value)))
    return int(digits[1]) if len(digits) >= 2 else None


def second_digit_counts(values: Iterable[int]) -> list[int]:
    """Bucket counts of second digits 0-9."""
    counts = [0] * 10
    for v in values:
        d = second_digit(v)
        if d is not None:
            counts[d] += 1
    return counts


def chi_square(observed: Sequence[int], expected_freq: Sequence[float]) -> float:
    """Pearson chi-square of counts against expected frequencies. Requires sum(observed) > 0."""
    total = sum(observed)
    stat = 0.0
    for obs, freq in zip(observed, expected_freq):
        expected = freq * total
        stat += (obs - expected) ** 2 / expected
    return stat


def pearson(xs: Sequence[float], ys: Sequence[float]) -> float | None:
    """Pearson r; None when either series is constant or empty."""
    if len(xs) != len(ys):
        raise ValueError(f"Length mismatch: {len(xs)} vs {len(ys)}")

    n = len(xs)
    if not n or min(xs) == max(xs) or min(ys) == max(ys):
        return None

    sum_x, sum_y = sum(xs), sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_x2 = sum(x * x for x in xs)
    sum_y2 = sum(y * y for y in ys)

    denom = (n * sum_x2 - sum_x**2) * (n * sum_y2 - sum_y**2)
    if denom <= 0:
        return None
    return (n * sum_xy - sum_x * sum_y) / sqrt(denom)


def fraud_zone_count(points: Iterable[tuple[float, float]], cutoff: float) -> int:
    """Points strictly above cutoff on both axes."""
    return sum(1 for x, y in points if x > cutoff and y > cutoff)


def histogram_2d(points: Iterable[tuple[float, float]], bins: int) -> dict[tuple[int, int], int]:
    """Sparse 2D histogram over the unit square. Values at 1.0 land in the last bin."""
    grid: dict[tuple[int, int], int] = defaultdict(int)
    for x, y in points:
        bx = min(max(int(x * bins), 0), bins - 1)
        by = min(max(int(y * bins), 0), bins - 1)
        grid[(bx, by)] += 1
    return dict(grid)


def degree_counts(edges: Iterable[tuple[str, str]]) -> dict[str, tuple[int, int]]:
    """(out_degree, in_degree) per node, in first-seen order."""
    out_deg: dict[str, int] = {}
    in_deg: dict[str, int] = {}
    for source, target in edges:
        for node in (source, target):
            out_deg.setdefault(node, 0)
            in_deg.setdefault(node, 0)
        out_deg[source] += 1
        in_deg[target] += 1
    return {node: (out_deg[node], in_deg[node]) for node in out_deg}


def degree_centrality(total_degree: int, node_count: int) -> float:
    """Degree normalized by the max in+out degree of a simple graph. Requires node_count > 1."""
    return total_degree / (2 * (node_count - 1))


def mean_std(values: Sequence[float]) -> tuple[float, float]:
    """Mean and population standard deviation."""
    n = len(values)
    if not n:
        return 0.0, 0.0
    mean = sum(values) / n
    return mean, sqrt(sum((v - mean) ** 2 for v in values) / n)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres."""
    dlat, dlon = radians(lat2 - lat1), radians(lon2 - lon1)
    a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * asin(sqrt(a))


def percent_difference(base: int, other: int) -> float:
    """|other - base| relative to base (floored at 1), in percent."""
    return abs(other - base) * 100 / max(base, 1)


def tally_discrepancy(a: dict[int, int], b: dict[int, int]) -> float:
    """Mean per-candidate percent difference; unmatched candidates count as 100."""
    contributions = [percent_difference(count, b[num]) if num in b else 100.0 for num, count in a.items()]
    contributions += [100.0 for num in b if num not in a]
    return sum(contributions) / len(contributions) if contributions else 100.0


def normalize(value: float, maximum: float) -> float:
    """Scale to [0, 1] against maximum, clamped."""
    return min(1.0, max(0.0, value / maximum))


def fuse_probabilities(probabilities: Iterable[float]) -> float:
    """P = 1 - prod(1 - p) over valid probabilities."""
    valid = [p for p in probabilities if 0 <= p <= 1]
    if not valid:
        return 0.0
    complement = 1.0
    for p in valid:
        complement *= 1 - p
    return 1 - complement
