"""
OCR text → Travel Document Extraction

A deterministic, rule-based extractor that turns the OCR text of flight
tickets and hotel bookings into classified, structured travel records
(kind, title, destination, date range, flight/hotel details).
"""

__version__ = "0.1.0"
