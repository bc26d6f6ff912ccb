"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("PVT_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("PVT_LOG_LEVEL", "INFO")

# Klimek model (Klimek et al. 2012)
KLIMEK_FRAUD_ZONE = float(os.getenv("PVT_KLIMEK_FRAUD_ZONE", "0.85"))
KLIMEK_CORRELATION_BASELINE = float(os.getenv("PVT_KLIMEK_CORRELATION_BASELINE", "0.3"))
KLIMEK_ALPHA_THRESHOLD = float(os.getenv("PVT_KLIMEK_ALPHA_THRESHOLD", "0.05"))
KLIMEK_BETA_THRESHOLD = float(os.getenv("PVT_KLIMEK_BETA_THRESHOLD", "0.2"))
KLIMEK_HEATMAP_BINS = int(os.getenv("PVT_KLIMEK_HEATMAP_BINS", "20"))

# Benford's law, second digit (chi-square df=9, p=0.05)
BENFORD_CHI_SQUARE_CRITICAL = float(os.getenv("PVT_BENFORD_CHI_SQUARE_CRITICAL", "16.92"))
BENFORD_CRITICAL_P_VALUE = float(os.getenv("PVT_BENFORD_CRITICAL_P_VALUE", "0.0001"))

# Network centrality
NETWORK_HUB_PERCENTILE = float(os.getenv("PVT_NETWORK_HUB_PERCENTILE", "0.05"))
NETWORK_HUB_FLOOR = float(os.getenv("PVT_NETWORK_HUB_FLOOR", "0.1"))
NETWORK_ALERT_SCORE = float(os.getenv("PVT_NETWORK_ALERT_SCORE", "0.7"))

# Spatial z-score tiers
SPATIAL_Z_THRESHOLD = float(os.getenv("PVT_SPATIAL_Z_THRESHOLD", "2.0"))
SPATIAL_Z_ESCALATION = float(os.getenv("PVT_SPATIAL_Z_ESCALATION", "2.5"))
SPATIAL_Z_CRITICAL = float(os.getenv("PVT_SPATIAL_Z_CRITICAL", "4.0"))

# OCR cross-validation (percent)
CROSS_VALIDATION_TOLERANCE = float(os.getenv("PVT_CROSS_VALIDATION_TOLERANCE", "5.0"))
CROSS_VALIDATION_CRITICAL = float(os.getenv("PVT_CROSS_VALIDATION_CRITICAL", "15.0"))

# PVT gap (votes, then fraction of official)
PVT_GAP_VOTES = int(os.getenv("PVT_GAP_VOTES", "10"))
PVT_GAP_HIGH = float(os.getenv("PVT_GAP_HIGH", "0.05"))
PVT_GAP_CRITICAL = float(os.getenv("PVT_GAP_CRITICAL", "0.10"))
PVT_TOTAL_GAP_PERCENT = float(os.getenv("PVT_TOTAL_GAP_PERCENT", "5.0"))

# Alerts
ALERT_MIN_SEVERITY = os.getenv("PVT_ALERT_MIN_SEVERITY", "medium")
