"""Utility modules for CommentInsight."""

from .data_prep import export_to_csv, export_to_json, load_comments, prepare_export

__all__ = [
    "export_to_csv",
    "export_to_json",
    "load_comments",
    "prepare_export",
]
