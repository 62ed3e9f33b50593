"""CommentInsight - keyword, sentiment and insight analysis for discussion comments."""

__version__ = "1.0.0"
__author__ = "CommentInsight Team"

from .core.models import *
from .core.config import settings, AnalysisConfig
from .core.pipeline import analyze
from .services.runner import AnalysisRunner

__all__ = [
    "settings",
    "AnalysisConfig",
    "analyze",
    "AnalysisRunner",
]
