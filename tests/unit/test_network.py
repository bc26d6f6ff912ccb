"""Tests for network centrality and hub detection."""

import pytest

from app.errors import InsufficientDataError
from app.models.common import Severity
from app.models.network import Edge
from app.services.network import NetworkAnalyzer


def edges(*pairs):
    return [Edge(source=s, target=t) for s, t in pairs]


STAR = edges(*[("BigBoss", f"L{i}") for i in range(1, 6)])


@pytest.fixture
def analyzer():
    return NetworkAnalyzer()


class TestCentrality:
    def test_star_hub_ranks_first(self, analyzer):
        result = analyzer.analyze(STAR)
        top = result.centrality[0]
        assert top.node == "BigBoss"
        assert top.out_degree == 5
        assert top.in_degree == 0
        assert top.centrality_score == 0.5

    def test_leaf_scores(self, analyzer):
        result = analyzer.analyze(STAR)
        assert all(n.centrality_score == 0.1 for n in result.centrality[1:])

    def test_cycle_counts(self, analyzer):
        result = analyzer.analyze(edges(("A", "B"), ("B", "C"), ("C", "A")))
        assert result.total_nodes == 3
        assert result.total_edges == 3
        assert result.nodes == ["A", "B", "C"]

    def test_self_loop(self, analyzer):
        result = analyzer.analyze(edges(("A", "A"), ("A", "B")))
        a = next(n for n in result.centrality if n.node == "A")
        assert a.out_degree == 2
        assert a.in_degree == 1
        assert a.total_degree == 3


class TestHubs:
    def test_star_hub(self, analyzer):
        result = analyzer.analyze(STAR)
        assert result.hub_threshold == 0.5
        assert [h.node for h in result.hubs] == ["BigBoss"]

    def test_floor_blocks_trivial_hubs(self):
        result = NetworkAnalyzer(hub_floor=0.5).analyze(STAR)
        assert result.hubs == []


class TestEdgeCases:
    def test_single_node(self, analyzer):
        with pytest.raises(InsufficientDataError):
            analyzer.analyze(edges(("A", "A")))

    def test_empty(self, analyzer):
        with pytest.raises(InsufficientDataError):
            analyzer.analyze([])


class TestVerdicts:
    def test_one_per_hub(self, analyzer):
        verdicts = analyzer.verdicts(analyzer.analyze(STAR))
        assert len(verdicts) == 1
        assert verdicts[0].subject == "BigBoss"
        assert verdicts[0].alert_type == "network_hub"

    def test_moderate_hub_is_low(self, analyzer):
        verdict = analyzer.verdicts(analyzer.analyze(STAR))[0]
        assert verdict.severity == Severity.LOW

    def test_dense_pair_is_high(self, analyzer):
        verdicts = analyzer.verdicts(analyzer.analyze(edges(("A", "B"), ("B", "A"))))
        assert [v.severity for v in verdicts] == [Severity.HIGH, Severity.HIGH]
