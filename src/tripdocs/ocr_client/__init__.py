"""
OCR server API client.

Provides:
- Multipart upload of an image or PDF to POST /api/ocr
- Typed {success, text, error} response
- Retry/backoff for transient network failures
"""

from .client import OCRAPIError, OCRClient, OCRConnectionError, OCRError, OCRResponse

__all__ = [
    "OCRClient",
    "OCRResponse",
    "OCRError",
    "OCRAPIError",
    "OCRConnectionError",
]
