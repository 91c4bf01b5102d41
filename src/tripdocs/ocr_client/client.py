"""
OCR server API client implementation.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)


class OCRError(Exception):
    """Base exception for OCR client errors."""
    pass


class OCRAPIError(OCRError):
    """API returned an error response."""
    def __init__(self, status_code: int, message: str, response_body: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.response_body = response_body
        super().__init__(f"OCR API error {status_code}: {message}")


class OCRConnectionError(OCRError):
    """Failed to connect to the OCR server."""
    pass


@dataclass
class OCRResponse:
    """OCR server reply: {success, text?, error?}."""
    success: bool
    text: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: dict) -> "OCRResponse":
        return cls(
            success=bool(data.get("success")),
            text=data.get("text"),
            error=data.get("error"),
        )


class OCRClient:
    """
    Client for the OCR server.

    Features:
    - Upload an image or PDF and get its text back
    - Automatic retry with backoff
    """

    DEFAULT_TIMEOUT = 30
    OCR_ENDPOINT = "/api/ocr"
    UPLOAD_FIELD = "image"

    def __init__(
        self,
        base_url: str,
        timeout: int = DEFAULT_TIMEOUT,
        max_retries: int = 3,
        backoff_factor: float = 0.5,
    ):
        """
        Initialize OCR client.

        Args:
            base_url: OCR server URL (e.g., "http://localhost:3000")
            timeout: Request timeout in seconds
            max_retries: Maximum retry attempts for transient failures
            backoff_factor: Backoff factor for retries
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=backoff_factor,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "POST"],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def _request(
        self,
        method: str,
        endpoint: str,
        files: Optional[dict] = None,
    ) -> requests.Response:
        """Make an API request with error handling."""
        url = f"{self.base_url}{endpoint}"

        try:
            response = self.session.request(
                method=method,
                url=url,
                files=files,
                timeout=self.timeout,
            )
        except requests.exceptions.ConnectionError as e:
            raise OCRConnectionError(f"Failed to connect to OCR server at {self.base_url}: {e}")
        except requests.exceptions.Timeout as e:
            raise OCRConnectionError(f"Request to OCR server timed out: {e}")
        except requests.exceptions.RequestException as e:
            raise OCRError(f"Request failed: {e}")

        if not response.ok:
            raise OCRAPIError(
                status_code=response.status_code,
                message=response.reason,
                response_body=response.text,
            )

        return response

    def test_connection(self) -> bool:
        """Test connection to the OCR server."""
        try:
            self._request("GET", "/")
            return True
        except OCRError:
            return False

    def recognize(self, file_path: Path, content_type: str) -> OCRResponse:
        """
        Upload a document and return its recognized text.

        Args:
            file_path: Image or PDF to upload
            content_type: MIME type sent with the upload

        Returns:
            Successful OCRResponse carrying the text

        Raises:
            OCRError: If the server reports failure or the request fails
        """
        file_path = Path(file_path)
        logger.debug("Sending %s (%s) to %s", file_path.name, content_type, self.base_url)

        with open(file_path, "rb") as f:
            files = {self.UPLOAD_FIELD: (file_path.name, f, content_type)}
            response = self._request("POST", self.OCR_ENDPOINT, files=files)

        try:
            data = response.json()
        except ValueError as e:
            raise OCRError(f"Invalid JSON from OCR server: {e}")

        if not isinstance(data, dict):
            raise OCRError(f"Unexpected OCR reply: {type(data).__name__}")

        result = OCRResponse.from_api_response(data)
        if not result.success:
            raise OCRError(result.error or "Failed to extract text")
        if result.text is not None and not isinstance(result.text, str):
            raise OCRError(f"Unexpected OCR text type: {type(result.text).__name__}")

        logger.info("OCR successful, text length: %d", len(result.text or ""))
        return result
