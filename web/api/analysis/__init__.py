"""Analysis API."""

from web.api.analysis.views import (
    analyze_benford,
    analyze_klimek,
    analyze_network,
    analyze_pvt,
    analyze_spatial,
    score_glue_fin,
)

__all__ = [
    "analyze_klimek",
    "analyze_benford",
    "analyze_network",
    "analyze_spatial",
    "analyze_pvt",
    "score_glue_fin",
]
