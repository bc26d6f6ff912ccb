"""Tests for the request boundary views."""

import pytest

from app.errors import InsufficientDataError, ValidationError
from web.api.analysis import (
    analyze_benford,
    analyze_klimek,
    analyze_network,
    analyze_pvt,
    analyze_spatial,
    score_glue_fin,
)
from web.api.ocr import cross_validate, get_tally_check


def tally(document_type, count, confidence=100.0):
    return {
        "station_code": "10-01-001",
        "province": "Yasothon",
        "constituency": "1",
        "document_type": document_type,
        "votes": [{"candidate_number": 1, "candidate_name": "Alice", "vote_count": count, "confidence": confidence}],
    }


class TestAnalysisViews:
    def test_klimek_alert(self):
        payload = {
            "units": [{"turnout": 0.9, "vote_share": 0.95}, {"turnout": 0.5, "vote_share": 0.6}],
            "province": "Yasothon",
        }
        response = analyze_klimek(payload)
        assert response.detector == "klimek"
        assert response.result["alpha"] == 0.5
        assert response.alerts[0].severity == "high"
        assert response.alerts[0].province == "Yasothon"

    def test_klimek_rejects_bad_turnout(self):
        with pytest.raises(ValidationError, match="turnout"):
            analyze_klimek({"units": [{"turnout": 1.5, "vote_share": 0.5}]})

    def test_klimek_rejects_empty(self):
        with pytest.raises(ValidationError):
            analyze_klimek({"units": []})

    def test_benford(self):
        response = analyze_benford({"votes": [110] * 100})
        assert response.verdicts[0].is_suspicious
        assert response.alerts[0].severity == "critical"
        assert len(response.result["deviations"]) == 10

    def test_benford_no_usable_counts(self):
        with pytest.raises(InsufficientDataError):
            analyze_benford({"votes": [1, 2, 3]})

    def test_network(self):
        response = analyze_network({"edges": [{"source": "H", "target": f"L{i}"} for i in range(5)]})
        assert response.result["hubs"] == ["H"]
        assert response.result["total_nodes"] == 6
        assert response.alerts == []

    def test_spatial_adjacency(self):
        payload = {
            "units": [
                {"id": "a", "latitude": 0, "longitude": 0, "metric_value": 10},
                {"id": "b", "latitude": 0, "longitude": 0, "metric_value": 12},
                {"id": "c", "latitude": 0, "longitude": 0, "metric_value": 8},
                {"id": "x", "latitude": 0, "longitude": 0, "metric_value": 100},
            ],
            "neighbors": {"mode": "adjacency", "adjacency": {"x": ["a", "b", "c"]}},
        }
        response = analyze_spatial(payload)
        assert response.alerts[0].station_code == "x"
        assert response.alerts[0].severity == "critical"

    def test_pvt(self):
        payload = {
            "stations": [
                {"station_code": "S-1", "crowdsourced": 200, "official": 180},
                {"station_code": "S-2", "crowdsourced": 100, "official": 100},
            ]
        }
        response = analyze_pvt(payload)
        assert [g["station_code"] for g in response.result["gaps"]] == ["S-1"]
        assert response.result["comparison"]["gap"] == 20
        assert response.alerts[0].severity == "critical"

    def test_glue_fin(self):
        response = score_glue_fin({"stations": [{"station_id": "S-1", "input": {"ocr_confidence": 95}}]})
        assert response.summary["total"] == 1
        assert response.stations[0]["result"]["level"] == "normal"


class TestOcrViews:
    def test_cross_validate_mismatch(self):
        response = cross_validate({"tally_a": tally("ss5_11", 100), "tally_b": tally("ss5_18", 110)})
        assert response.discrepancy == 10
        assert not response.is_valid
        assert response.alert["severity"] == "high"
        assert response.mismatches[0].count_b == 110

    def test_cross_validate_wrong_types(self):
        with pytest.raises(ValidationError, match="wrong document types"):
            cross_validate({"tally_a": tally("ss5_18", 100), "tally_b": tally("ss5_11", 100)})

    def test_same_document(self):
        payload = {"tally_a": tally("ss5_11", 100, 90), "tally_b": tally("ss5_11", 100), "same_document": True}
        response = cross_validate(payload)
        assert response.is_valid
        assert response.overall_confidence == 95

    def test_unknown_document_type(self):
        with pytest.raises(ValidationError):
            cross_validate({"tally_a": tally("ss5_99", 100), "tally_b": tally("ss5_18", 100)})

    def test_tally_check(self):
        payload = tally("ss5_18", 500) | {"total_voters": 1000, "total_ballots": 800, "spoiled_ballots": 20}
        response = get_tally_check(payload)
        assert response.is_consistent
        assert response.turnout == 0.8
