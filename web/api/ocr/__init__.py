"""OCR API."""

from web.api.ocr.views import cross_validate, get_tally_check

__all__ = ["cross_validate", "get_tally_check"]
