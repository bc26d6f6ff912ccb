"""Relationship graph entities."""

from dataclasses import dataclass

from app.models.common import BaseEntity


@dataclass(frozen=True)
class Edge(BaseEntity):
    """Directed link between two actors (funds, coordination, shares)."""

    source: str
    target: str


@dataclass(frozen=True)
class NodeCentrality(BaseEntity):
    node: str
    out_degree: int
    in_degree: int
    total_degree: int
    centrality_score: float
    is_hub: bool


@dataclass(frozen=True)
class NetworkResult(BaseEntity):
    """Degree centrality for every node, sorted by score descending."""

    centrality: list[NodeCentrality]
    hub_threshold: float
    total_nodes: int
    total_edges: int

    @property
    def hubs(self) -> list[NodeCentrality]:
        return [n for n in self.centrality if n.is_hub]

    @property
    def nodes(self) -> list[str]:
        return [n.node for n in self.centrality]
