"""Network domain."""

from app.models.network.entities import Edge, NetworkResult, NodeCentrality

__all__ = ["Edge", "NodeCentrality", "NetworkResult"]
