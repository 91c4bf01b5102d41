"""
CLI runner module.

Provides commands:
- extract: Extract travel info from OCR text
- parse: OCR a document and extract travel info
- init-config: Write a default config file
"""

from .main import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
