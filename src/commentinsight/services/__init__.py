"""Services for CommentInsight."""

from .runner import AnalysisRunner, run_analysis

__all__ = [
    "AnalysisRunner",
    "run_analysis",
]
