"""OCR tally validation."""

from app.services.ocr.cross_validation import CrossValidator
from app.services.ocr.tally_checks import check_tally, to_observation

__all__ = ["CrossValidator", "check_tally", "to_observation"]
