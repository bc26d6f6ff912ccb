"""Degree-centrality hub detection over actor relationship graphs."""

from collections.abc import Sequence
from math import floor

from loguru import logger

import settings
from app.errors import InsufficientDataError
from app.models.common import AnomalyVerdict, Detector
from app.models.network import Edge, NetworkResult, NodeCentrality
from app.services.alerts.severity import DEFAULT_POLICY, SeverityPolicy
from helpers import formulas


class NetworkAnalyzer:
    """Rank actors by normalized degree and flag coordination hubs."""

    def __init__(
        self,
        hub_percentile: float = settings.NETWORK_HUB_PERCENTILE,
        hub_floor: float = settings.NETWORK_HUB_FLOOR,
        policy: SeverityPolicy = DEFAULT_POLICY,
    ):
        self.hub_percentile = hub_percentile
        self.hub_floor = hub_floor
        self._policy = policy
        logger.debug("NetworkAnalyzer initialized (top {:.0%}, floor={})", hub_percentile, hub_floor)

    def analyze(self, edges: Sequence[Edge]) -> NetworkResult:
        """Centrality of every node, highest first. Ties keep first-seen order."""
        degrees = formulas.degree_counts((e.source, e.target) for e in edges)
        node_count = len(degrees)
        if node_count <= 1:
            raise InsufficientDataError(f"Centrality needs at least two nodes, got {node_count}")

        ranked = sorted(
            (
                (node, out_deg, in_deg, formulas.degree_centrality(out_deg + in_deg, node_count))
                for node, (out_deg, in_deg) in degrees.items()
            ),
            key=lambda row: row[3],
            reverse=True,
        )

        hub_index = min(floor(node_count * self.hub_percentile), node_count - 1)
        hub_threshold = ranked[hub_index][3]

        centrality = [
            NodeCentrality(
                node=node,
                out_degree=out_deg,
                in_degree=in_deg,
                total_degree=out_deg + in_deg,
                centrality_score=score,
                is_hub=score >= hub_threshold and score > self.hub_floor,
            )
            for node, out_deg, in_deg, score in ranked
        ]

        result = NetworkResult(
            centrality=centrality,
            hub_threshold=hub_threshold,
            total_nodes=node_count,
            total_edges=len(edges),
        )
        logger.info("Network: {} nodes, {} edges, {} hubs", node_count, len(edges), len(result.hubs))
        return result

    def verdicts(self, result: NetworkResult) -> list[AnomalyVerdict]:
        """One verdict per hub."""
        return [
            AnomalyVerdict(
                detector=Detector.NETWORK,
                alert_type="network_hub",
                score=hub.centrality_score,
                is_suspicious=True,
                severity=self._policy.network(hub.centrality_score),
                summary=(
                    f"Coordination hub {hub.node}: centrality={hub.centrality_score:.3f} "
                    f"(out={hub.out_degree}, in={hub.in_degree})"
                ),
                subject=hub.node,
                details={"out_degree": hub.out_degree, "in_degree": hub.in_degree},
            )
            for hub in result.hubs
        ]
