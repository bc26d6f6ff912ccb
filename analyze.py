#!/usr/bin/env python3
"""
Run a forensic detector over a CSV file and print its verdicts and alerts.

Usage:
    python analyze.py klimek units.csv             # turnout,vote_share (or raw counts)
    python analyze.py benford votes.csv            # vote_count
    python analyze.py network edges.csv            # source,target
    python analyze.py spatial units.csv --k=5      # id,latitude,longitude,metric_value
    python analyze.py spatial units.csv --km=3.5
    python analyze.py pvt stations.csv             # station_code,crowdsourced,official
    python analyze.py glue-fin stations.csv        # station_id + signal columns
    python analyze.py pvt stations.csv --log       # also write a daily log file under PVT_LOG_DIR
"""

import sys
from pathlib import Path

from loguru import logger

from app.container import container
from app.errors import AnalysisError, ValidationError
from app.models.common import AnomalyVerdict
from app.services.ingest import frames
from app.services.spatial import NeighborResolver, k_nearest, within_distance
from settings.logging import setup_logging

SEVERITY_ICONS = {"low": "⚪", "medium": "🟡", "high": "🟠", "critical": "🔴"}


def _option(args: list[str], name: str) -> str | None:
    prefix = f"--{name}="
    for arg in args:
        if arg.startswith(prefix):
            return arg[len(prefix) :]
    return None


def spatial_resolver(args: list[str]) -> NeighborResolver:
    """--k=N nearest units, else units within --km (default 5 km)."""
    k = _option(args, "k")
    km = _option(args, "km")
    try:
        return k_nearest(int(k)) if k else within_distance(float(km or 5.0))
    except ValueError as e:
        raise ValidationError(f"Bad neighbor option: {e}") from e


def run_detector(detector: str, df, args: list[str]) -> list[AnomalyVerdict]:
    """Run one detector and print its headline numbers."""
    if detector == "klimek":
        result = container.klimek.analyze(frames.observations(df))
        print(f"  Units: {result.total_units:,}  (fraud zone: {result.fraud_zone_count:,})")
        print(f"  Alpha: {result.alpha:.4f}  Beta: {result.beta:.4f}")
        return [container.klimek.verdict(result)]

    if detector == "benford":
        result = container.benford.analyze(frames.vote_counts(df))
        print(f"  Counts: {result.total:,}")
        print(f"  Chi-square: {result.chi_square:.2f}  p: {result.p_value:.3g}")
        return [container.benford.verdict(result)]

    if detector == "network":
        result = container.network.analyze(frames.edges(df))
        print(f"  Nodes: {result.total_nodes:,}  Edges: {result.total_edges:,}")
        for node in result.centrality[:10]:
            hub = " (hub)" if node.is_hub else ""
            print(f"    {node.node}: {node.centrality_score:.3f}{hub}")
        return container.network.verdicts(result)

    if detector == "spatial":
        result = container.spatial.analyze(frames.spatial_units(df), spatial_resolver(args))
        print(f"  Units: {len(result.scores):,}  Unscored: {len(result.unscored):,}")
        return container.spatial.verdicts(result)

    if detector == "pvt":
        counts = frames.station_counts(df)
        comparison = container.pvt.compare_totals([c.official for c in counts], [c.crowdsourced for c in counts])
        print(f"  Official: {comparison.official_total:,}  Crowd-sourced: {comparison.crowdsourced_total:,}")
        print(f"  Gap: {comparison.gap:,} ({comparison.gap_percent:.2f}%)")
        return [container.pvt.verdict(g) for g in container.pvt.check_gaps(counts)]

    if detector == "glue-fin":
        scores = container.glue_fin.score_stations(frames.station_inputs(df))
        for station in scores.stations:
            r = station.result
            print(f"  {r.level_emoji} {station.station_id}: {r.score} ({r.level_description})")
        print(f"  Average: {scores.summary.average_score}  High risk: {len(scores.summary.high_risk_stations)}")
        return []

    print(__doc__)
    sys.exit(1)


def main():
    args = sys.argv[1:]
    positional = [a for a in args if not a.startswith("--")]
    if len(positional) != 2:
        print(__doc__)
        sys.exit(1)

    detector, csv_path = positional
    if not Path(csv_path).exists():
        print(f"\n⚠️  File not found: {csv_path}\n")
        sys.exit(1)

    setup_logging(to_file="--log" in args, run_name=detector)
    container.init()

    print("\n" + "=" * 60)
    print(f"{detector.upper()} ANALYSIS - {csv_path}")
    print("=" * 60)

    with logger.contextualize(detector=detector):
        try:
            verdicts = run_detector(detector, frames.read_csv(csv_path), args)
        except AnalysisError as e:
            logger.error("{} failed: {}", detector, e.message)
            print(f"\n❌ {e.message}\n")
            sys.exit(2)

    alerts = container.alerts.collect(verdicts)
    suspicious = [v for v in verdicts if v.is_suspicious]

    print(f"\nVerdicts: {len(verdicts)} ({len(suspicious)} suspicious)")
    for verdict in suspicious:
        print(f"  {SEVERITY_ICONS[verdict.severity]} {verdict.summary}")

    print("\n" + "=" * 60)
    if alerts:
        print(f"❌ {len(alerts)} alerts raised")
        for alert in alerts:
            print(f"  [{alert.severity.upper()}] {alert.alert_type}: {alert.summary}")
    else:
        print("✅ No alerts")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
