"""Utility modules for ReviewHub."""

from .data_prep import export_to_csv, prepare_export
from .report import format_report, format_review, format_summary

__all__ = [
    "export_to_csv",
    "prepare_export",
    "format_report",
    "format_review",
    "format_summary",
]
