"""Error taxonomy for CommentInsight.

Empty or degenerate input is never an error: it resolves to an empty
``AnalysisResult``. Everything else falls into one of these kinds:

- ``ConfigurationError``: the caller passed an invalid ``AnalysisConfig``.
  Reject immediately, never retry.
- ``MalformedCommentError``: a comment record broke the input contract
  (missing body, non-string body). Indicates a bug upstream.
- ``ExecutionError``: the worker boundary failed (timeout, crash). Retryable.
- ``AnalysisCancelledError``: the caller abandoned the computation.
"""


class AnalysisError(Exception):
    """Base class for all analysis errors."""

    retryable = False


class ConfigurationError(AnalysisError, ValueError):
    """Invalid analysis configuration."""


class MalformedCommentError(AnalysisError, TypeError):
    """A comment record does not satisfy the input contract."""


class ExecutionError(AnalysisError):
    """The execution environment failed; the whole call may be retried."""

    retryable = True


class AnalysisTimeoutError(ExecutionError):
    """The analysis did not finish within the wall-clock timeout."""


class WorkerCrashError(ExecutionError):
    """The worker raised an unexpected exception."""


class AnalysisCancelledError(AnalysisError):
    """The caller cancelled the analysis."""
