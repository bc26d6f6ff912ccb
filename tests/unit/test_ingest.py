"""Tests for polars ingestion adapters."""

import polars as pl
import pytest

from app.errors import ValidationError
from app.services.ingest import frames


class TestObservations:
    def test_direct_columns(self):
        df = pl.DataFrame({"turnout": [0.7, None], "vote_share": [0.6, 0.5]})
        [obs] = frames.observations(df)
        assert obs.turnout == 0.7
        assert obs.vote_share == 0.6

    def test_derived_from_counts(self):
        df = pl.DataFrame(
            {
                "total_voters": [1000, 0],
                "total_ballots": [900, 0],
                "valid_votes": [880, 0],
                "winner_votes": [800, 0],
            }
        )
        [obs] = frames.observations(df)
        assert obs.turnout == pytest.approx(0.9)
        assert obs.vote_share == pytest.approx(800 / 880)

    def test_non_finite_rows_dropped(self):
        df = pl.DataFrame({"turnout": [0.7, float("nan"), 0.8], "vote_share": [0.6, 0.5, float("inf")]})
        [obs] = frames.observations(df)
        assert obs.turnout == 0.7

    def test_missing_columns(self):
        with pytest.raises(ValidationError, match="Missing columns"):
            frames.observations(pl.DataFrame({"turnout": [0.5]}))


class TestOtherAdapters:
    def test_vote_counts(self):
        df = pl.DataFrame({"vote_count": [110, None, 42]})
        assert frames.vote_counts(df) == [110, 42]

    def test_edges(self):
        df = pl.DataFrame({"source": ["A", "B"], "target": ["B", "C"]})
        assert [(e.source, e.target) for e in frames.edges(df)] == [("A", "B"), ("B", "C")]

    def test_spatial_units(self):
        df = pl.DataFrame({"id": [1, 2], "latitude": [15.8, 15.9], "longitude": [104.1, 104.2], "turnout": [0.7, 0.8]})
        units = frames.spatial_units(df, metric="turnout")
        assert units[0].id == "1"
        assert units[1].metric_value == 0.8

    def test_station_counts(self):
        df = pl.DataFrame({"station_code": ["S-1"], "crowdsourced": [200], "official": [180]})
        [count] = frames.station_counts(df)
        assert (count.station_code, count.crowdsourced, count.official) == ("S-1", 200, 180)

    def test_uncastable_values(self):
        df = pl.DataFrame({"station_code": ["S-1"], "crowdsourced": ["abc"], "official": [180]})
        with pytest.raises(ValidationError, match="Unusable column values"):
            frames.station_counts(df)

    def test_station_inputs(self):
        df = pl.DataFrame({"station_id": ["A", "B"], "ocr_confidence": [90.0, None], "sna_centrality": [0.2, 0.4]})
        stations = frames.station_inputs(df)
        assert stations[0].input.ocr_confidence == 90.0
        assert stations[1].input.ocr_confidence is None
        assert stations[1].input.klimek_alpha is None
        assert stations[0].station_name is None
