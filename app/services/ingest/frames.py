"""polars DataFrame adapters for analyzer inputs."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import polars as pl
from loguru import logger

from app.errors import ValidationError
from app.models.composite import GlueFinInput, StationInput
from app.models.klimek import UnitObservation
from app.models.network import Edge
from app.models.pvt import StationCount
from app.models.spatial import SpatialUnit


def _require(df: pl.DataFrame, *columns: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValidationError(f"Missing columns: {', '.join(missing)}")


@contextmanager
def _cast_errors() -> Iterator[None]:
    try:
        yield
    except pl.exceptions.PolarsError as e:
        raise ValidationError(f"Unusable column values: {e}") from e


def read_csv(path: str | Path) -> pl.DataFrame:
    try:
        df = pl.read_csv(path)
    except pl.exceptions.PolarsError as e:
        raise ValidationError(f"Cannot read {path}: {e}") from e
    logger.debug("Loaded {} rows from {}", df.height, path)
    return df


def observations(df: pl.DataFrame) -> list[UnitObservation]:
    """Rows with turnout and vote_share, or with counts to derive them from.

    Derived form needs total_voters, total_ballots, valid_votes and
    winner_votes. Rows with zero denominators are dropped.
    """
    if {"turnout", "vote_share"} <= set(df.columns):
        with _cast_errors():
            frame = df.select(pl.col("turnout").cast(pl.Float64), pl.col("vote_share").cast(pl.Float64))
    else:
        _require(df, "total_voters", "total_ballots", "valid_votes", "winner_votes")
        with _cast_errors():
            frame = df.filter((pl.col("total_voters") > 0) & (pl.col("valid_votes") > 0)).select(
                (pl.col("total_ballots") / pl.col("total_voters")).alias("turnout"),
                (pl.col("winner_votes") / pl.col("valid_votes")).alias("vote_share"),
            )

    # NaN survives drop_nulls
    frame = frame.drop_nulls().filter(pl.col("turnout").is_finite() & pl.col("vote_share").is_finite())

    dropped = df.height - frame.height
    if dropped:
        logger.warning("Dropped {} rows without usable turnout or vote share", dropped)
    return [UnitObservation(turnout=t, vote_share=s) for t, s in frame.iter_rows()]


def vote_counts(df: pl.DataFrame, column: str = "vote_count") -> list[int]:
    _require(df, column)
    with _cast_errors():
        return df.get_column(column).drop_nulls().cast(pl.Int64).to_list()


def edges(df: pl.DataFrame) -> list[Edge]:
    _require(df, "source", "target")
    with _cast_errors():
        frame = df.select(pl.col("source").cast(pl.Utf8), pl.col("target").cast(pl.Utf8)).drop_nulls()
    return [Edge(source=s, target=t) for s, t in frame.iter_rows()]


def spatial_units(df: pl.DataFrame, metric: str = "metric_value") -> list[SpatialUnit]:
    _require(df, "id", "latitude", "longitude", metric)
    with _cast_errors():
        frame = df.select(
            pl.col("id").cast(pl.Utf8),
            pl.col("latitude").cast(pl.Float64),
            pl.col("longitude").cast(pl.Float64),
            pl.col(metric).cast(pl.Float64),
        ).drop_nulls()
    return [
        SpatialUnit(id=uid, latitude=lat, longitude=lon, metric_value=value)
        for uid, lat, lon, value in frame.iter_rows()
    ]


def station_counts(df: pl.DataFrame) -> list[StationCount]:
    _require(df, "station_code", "crowdsourced", "official")
    with _cast_errors():
        frame = df.select(
            pl.col("station_code").cast(pl.Utf8),
            pl.col("crowdsourced").cast(pl.Int64),
            pl.col("official").cast(pl.Int64),
        ).drop_nulls()
    return [StationCount(station_code=c, crowdsourced=cs, official=o) for c, cs, o in frame.iter_rows()]


GLUE_FIN_COLUMNS = (
    "ocr_confidence",
    "klimek_alpha",
    "klimek_beta",
    "fraud_zone_percentage",
    "benford_chi_square",
    "pvt_gap_percentage",
    "sna_centrality",
)


def station_inputs(df: pl.DataFrame) -> list[StationInput]:
    """One GLUE-FIN input per row. Signal columns are optional; nulls stay missing."""
    _require(df, "station_id")
    present = [c for c in GLUE_FIN_COLUMNS if c in df.columns]
    with _cast_errors():
        frame = df.with_columns(pl.col("station_id").cast(pl.Utf8), *(pl.col(c).cast(pl.Float64) for c in present))

    stations = []
    for row in frame.iter_rows(named=True):
        signals = {c: row[c] for c in present}
        stations.append(
            StationInput(
                station_id=row["station_id"],
                station_name=row.get("station_name"),
                input=GlueFinInput(**signals),
            )
        )
    return stations
