"""
Configuration management (SSOT).

This module defines ALL configuration for the tripdocs application.
All config keys are defined here; no other module should invent config keys.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class OCRConfig:
    """OCR server configuration."""

    base_url: str = "http://localhost:3000"
    # Request timeout (seconds)
    timeout_seconds: int = 30
    # Max retries for transient failures (429/5xx)
    max_retries: int = 3


@dataclass
class ExtractionConfig:
    """Extraction defaults."""

    # end_date = start_date + default_trip_days when only one date is found
    default_trip_days: int = 7
    # OCR text shorter than this (stripped) is rejected
    min_text_length: int = 20


@dataclass
class Config:
    """Application configuration (SSOT)."""

    ocr: OCRConfig = field(default_factory=OCRConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)

    def validate(self) -> list[str]:
        """Validate configuration completeness and consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not self.ocr.base_url:
            errors.append("ocr.base_url is required")
        if self.ocr.timeout_seconds <= 0:
            errors.append("ocr.timeout_seconds must be positive")
        if self.ocr.max_retries < 0:
            errors.append("ocr.max_retries must be >= 0")
        if self.extraction.default_trip_days < 0:
            errors.append("extraction.default_trip_days must be >= 0")
        if self.extraction.min_text_length < 0:
            errors.append("extraction.min_text_length must be >= 0")

        return errors


def load_config(config_path: Path) -> Config:
    """
    Load configuration from YAML file.

    Environment variables can override config values:
    - TRIPDOCS_OCR_URL
    - TRIPDOCS_OCR_TIMEOUT (request timeout in seconds)
    - TRIPDOCS_TRIP_DAYS (default trip length)
    """
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    else:
        data = {}

    ocr_data = data.get("ocr", {})
    ocr = OCRConfig(
        base_url=os.environ.get(
            "TRIPDOCS_OCR_URL", ocr_data.get("base_url", "http://localhost:3000")
        ),
        timeout_seconds=int(os.environ.get(
            "TRIPDOCS_OCR_TIMEOUT", ocr_data.get("timeout_seconds", 30)
        )),
        max_retries=ocr_data.get("max_retries", 3),
    )

    extraction_data = data.get("extraction", {})
    trip_days = extraction_data.get("default_trip_days", 7)
    trip_days_env = os.environ.get("TRIPDOCS_TRIP_DAYS", "")
    if trip_days_env:
        try:
            trip_days = int(trip_days_env)
        except ValueError:
            pass  # Keep configured value

    extraction = ExtractionConfig(
        default_trip_days=trip_days,
        min_text_length=extraction_data.get("min_text_length", 20),
    )

    return Config(ocr=ocr, extraction=extraction)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    default_config = """# tripdocs configuration

# OCR server (accepts POST /api/ocr with a multipart "image" field)
ocr:
  base_url: "http://localhost:3000"
  timeout_seconds: 30
  max_retries: 3                 # Retries on 429/5xx with backoff

# Extraction defaults
extraction:
  default_trip_days: 7           # end_date = start_date + N when only one date is found
  min_text_length: 20            # Reject OCR output shorter than this
"""

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        f.write(default_config)
