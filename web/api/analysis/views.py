"""Analysis API views - thin layer over services."""

from typing import Any

from app.container import container
from app.models.common import Alert, AlertContext, AnomalyVerdict, Detector
from app.models.composite import GlueFinInput, StationInput
from app.models.klimek import UnitObservation
from app.models.network import Edge
from app.models.pvt import StationCount
from app.models.spatial import SpatialUnit
from app.services.spatial import NeighborResolver, adjacency, k_nearest, within_distance
from web.api.errors import parse_request

from .schemas import (
    AlertItem,
    AnalysisResponse,
    BenfordRequest,
    GlueFinRequest,
    GlueFinResponse,
    KlimekRequest,
    NeighborsIn,
    NetworkRequest,
    PvtRequest,
    SpatialRequest,
    VerdictItem,
)


def _response(
    detector: Detector,
    result: dict[str, Any],
    verdicts: list[AnomalyVerdict],
    context: AlertContext | None = None,
) -> AnalysisResponse:
    alerts: list[Alert] = container.alerts.collect(verdicts, context)
    return AnalysisResponse(
        detector=detector.value,
        result=result,
        verdicts=[VerdictItem(**v.to_dict()) for v in verdicts],
        alerts=[AlertItem(**a.to_dict()) for a in alerts],
    )


def _resolver(neighbors: NeighborsIn) -> NeighborResolver:
    if neighbors.mode == "k_nearest":
        return k_nearest(neighbors.k)
    if neighbors.mode == "adjacency":
        return adjacency(neighbors.adjacency)
    return within_distance(neighbors.km)


def analyze_klimek(payload: dict) -> AnalysisResponse:
    """Klimek model over a batch of polling units."""
    container.init()
    request = parse_request(KlimekRequest, payload)
    units = [UnitObservation(turnout=u.turnout, vote_share=u.vote_share) for u in request.units]

    result = container.klimek.analyze(units)
    context = AlertContext(
        station_code=request.station_code,
        province=request.province,
        constituency=request.constituency,
    )
    return _response(Detector.KLIMEK, result.to_dict(), [container.klimek.verdict(result)], context)


def analyze_benford(payload: dict) -> AnalysisResponse:
    """Second-digit Benford test over vote counts."""
    container.init()
    request = parse_request(BenfordRequest, payload)

    result = container.benford.analyze(request.votes)
    data = result.to_dict()
    data["deviations"] = [d.to_dict() for d in result.deviations]
    context = AlertContext(province=request.province, constituency=request.constituency)
    return _response(Detector.BENFORD, data, [container.benford.verdict(result)], context)


def analyze_network(payload: dict) -> AnalysisResponse:
    """Centrality ranking and hubs of a relationship graph."""
    container.init()
    request = parse_request(NetworkRequest, payload)

    result = container.network.analyze([Edge(source=e.source, target=e.target) for e in request.edges])
    data = result.to_dict()
    data["hubs"] = [h.node for h in result.hubs]
    return _response(Detector.NETWORK, data, container.network.verdicts(result))


def analyze_spatial(payload: dict) -> AnalysisResponse:
    """Neighbor z-scores for every unit."""
    container.init()
    request = parse_request(SpatialRequest, payload)
    units = [
        SpatialUnit(id=u.id, latitude=u.latitude, longitude=u.longitude, metric_value=u.metric_value)
        for u in request.units
    ]

    result = container.spatial.analyze(units, _resolver(request.neighbors))
    return _response(Detector.SPATIAL, result.to_dict(), container.spatial.verdicts(result))


def analyze_pvt(payload: dict) -> AnalysisResponse:
    """Per-station gaps and the aggregate comparison."""
    container.init()
    request = parse_request(PvtRequest, payload)
    counts = [
        StationCount(station_code=s.station_code, crowdsourced=s.crowdsourced, official=s.official)
        for s in request.stations
    ]

    gaps = container.pvt.check_gaps(counts)
    comparison = container.pvt.compare_totals([c.official for c in counts], [c.crowdsourced for c in counts])
    data = {"gaps": [g.to_dict() for g in gaps], "comparison": comparison.to_dict()}
    return _response(Detector.PVT_GAP, data, [container.pvt.verdict(g) for g in gaps])


def score_glue_fin(payload: dict) -> GlueFinResponse:
    """GLUE-FIN composite score for each station."""
    container.init()
    request = parse_request(GlueFinRequest, payload)
    stations = [
        StationInput(
            station_id=s.station_id,
            station_name=s.station_name,
            input=GlueFinInput(**s.input.model_dump()),
        )
        for s in request.stations
    ]

    scores = container.glue_fin.score_stations(stations)
    return GlueFinResponse(
        stations=[s.to_dict() for s in scores.stations],
        summary=scores.summary.to_dict(),
    )
