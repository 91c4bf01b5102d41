"""
Services built on top of the extractors.
"""

from .document_parser import DocumentParser

__all__ = ["DocumentParser"]
