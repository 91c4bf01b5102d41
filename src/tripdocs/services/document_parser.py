"""
Document parsing workflow: file-type gate → OCR → travel extraction.

Never raises. Every failure is reported as a failed ParseResult so the
caller can fall back to manual entry.
"""

import logging
import mimetypes
from pathlib import Path
from typing import Optional

from ..extractors.travel import DEFAULT_TRIP_DAYS, extract_travel_info
from ..ocr_client import OCRClient, OCRError
from ..schemas.travel_document import ParseResult

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")
PDF_EXTENSION = ".pdf"

UNSUPPORTED_FILE_MESSAGE = "Unsupported file type. Please use an image or PDF."
INSUFFICIENT_TEXT_MESSAGE = (
    "Could not extract sufficient text from the document. Please try a clearer document."
)
PARSE_FAILED_MESSAGE = "Failed to parse document"

DEFAULT_MIN_TEXT_LENGTH = 20


def is_image(file_name: str, file_type: str) -> bool:
    return "image" in file_type.lower() or file_name.lower().endswith(IMAGE_EXTENSIONS)


def is_pdf(file_name: str, file_type: str) -> bool:
    return "pdf" in file_type.lower() or file_name.lower().endswith(PDF_EXTENSION)


class DocumentParser:
    """
    Parses an uploaded travel document into a TravelDocumentInfo.

    The OCR client is the only I/O dependency; extraction itself is pure.
    """

    def __init__(
        self,
        ocr_client: OCRClient,
        min_text_length: int = DEFAULT_MIN_TEXT_LENGTH,
        trip_days: int = DEFAULT_TRIP_DAYS,
    ):
        self.ocr_client = ocr_client
        self.min_text_length = min_text_length
        self.trip_days = trip_days

    def parse(self, file_path: Path, file_type: Optional[str] = None) -> ParseResult:
        """
        Parse a document file.

        Args:
            file_path: Image or PDF on disk
            file_type: MIME type; guessed from the file name when omitted

        Returns:
            ParseResult from extraction, or a failure describing what went wrong
        """
        file_path = Path(file_path)
        if file_type is None:
            file_type = mimetypes.guess_type(file_path.name)[0] or ""

        logger.info("Parsing document: %s (%s)", file_path, file_type or "unknown type")

        pdf = is_pdf(file_path.name, file_type)
        if not pdf and not is_image(file_path.name, file_type):
            logger.warning("Unsupported file type for %s: %r", file_path.name, file_type)
            return ParseResult.failure(UNSUPPORTED_FILE_MESSAGE)

        upload_type = "application/pdf" if pdf else "image/jpeg"

        try:
            response = self.ocr_client.recognize(file_path, upload_type)
        except (OCRError, OSError) as e:
            logger.error("OCR failed for %s: %s", file_path.name, e)
            return ParseResult.failure(PARSE_FAILED_MESSAGE)
        except Exception:
            logger.exception("Unexpected error parsing %s", file_path.name)
            return ParseResult.failure(PARSE_FAILED_MESSAGE)

        text = response.text or ""
        if len(text.strip()) < self.min_text_length:
            logger.info("Insufficient text extracted from %s", file_path.name)
            return ParseResult.failure(INSUFFICIENT_TEXT_MESSAGE)

        return extract_travel_info(text, trip_days=self.trip_days)
