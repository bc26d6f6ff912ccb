from app.services.composite.glue_fin import GlueFinIndex, fraud_probability, risk_level

__all__ = ["GlueFinIndex", "fraud_probability", "risk_level"]
