"""Run analysis on a worker thread with a timeout, cancellation and retries."""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Optional, Sequence

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..core import pipeline
from ..core.config import AnalysisConfig, settings
from ..core.constants import WorkerConstants
from ..core.errors import (
    AnalysisCancelledError,
    AnalysisError,
    AnalysisTimeoutError,
    ExecutionError,
    WorkerCrashError,
)
from ..core.models import AnalysisResult, Comment
from ..core.pipeline import ProgressCallback

logger = logging.getLogger(__name__)


class AnalysisRunner:
    """Keeps the caller responsive while a batch is analyzed.

    Each attempt gets a fresh single-thread executor. Only ``ExecutionError``
    (timeouts and unexpected worker exceptions) is retried; configuration and
    input errors surface on the first attempt.

    A timed-out or cancelled worker is signalled and abandoned, not killed.
    Executor threads are non-daemon, so the interpreter still joins any
    abandoned worker at exit; a process that times out only exits once those
    workers reach their cancel check or finish.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        retry_backoff: Optional[float] = None,
    ):
        self.timeout = settings.worker_timeout if timeout is None else timeout
        self.max_retries = settings.max_retries if max_retries is None else max_retries
        self.retry_delay = settings.retry_delay if retry_delay is None else retry_delay
        self.retry_backoff = settings.retry_backoff if retry_backoff is None else retry_backoff

    def run(
        self,
        comments: Sequence[Comment],
        config: Optional[AnalysisConfig] = None,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> AnalysisResult:
        """Analyze comments off-thread and wait for the result."""
        config = (config or AnalysisConfig.from_settings()).validate()

        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_exponential(multiplier=self.retry_delay, exp_base=self.retry_backoff,
                                  max=WorkerConstants.RETRY_MAX_WAIT),
            retry=retry_if_exception_type(ExecutionError),
            before_sleep=self._log_retry,
            reraise=True,
        )
        return retrying(self._run_once, comments, config, on_progress, cancel_event)

    def _run_once(
        self,
        comments: Sequence[Comment],
        config: AnalysisConfig,
        on_progress: Optional[ProgressCallback],
        cancel_event: Optional[threading.Event],
    ) -> AnalysisResult:
        if cancel_event is not None and cancel_event.is_set():
            raise AnalysisCancelledError("Analysis cancelled by caller")

        worker_cancel = threading.Event()
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="commentinsight-worker")
        try:
            future = executor.submit(pipeline.analyze, comments, config, on_progress, worker_cancel)
            deadline = time.monotonic() + self.timeout

            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    worker_cancel.set()
                    logger.warning(f"Analysis timed out after {self.timeout}s")
                    raise AnalysisTimeoutError(f"Analysis did not finish within {self.timeout}s")

                done, _ = wait([future], timeout=min(remaining, WorkerConstants.POLL_INTERVAL))
                if done:
                    break

                if cancel_event is not None and cancel_event.is_set():
                    worker_cancel.set()
                    raise AnalysisCancelledError("Analysis cancelled by caller")

            if cancel_event is not None and cancel_event.is_set():
                raise AnalysisCancelledError("Analysis cancelled by caller")

            try:
                return future.result()
            except AnalysisError:
                raise
            except Exception as e:
                logger.error(f"Analysis worker failed: {e}")
                raise WorkerCrashError(f"Analysis worker failed: {e}") from e
        finally:
            # Never block on an abandoned worker; its output is discarded.
            executor.shutdown(wait=False)

    @staticmethod
    def _log_retry(retry_state) -> None:
        error = retry_state.outcome.exception()
        logger.warning(f"Analysis attempt {retry_state.attempt_number} failed: {error}. Retrying...")


def run_analysis(
    comments: Sequence[Comment],
    config: Optional[AnalysisConfig] = None,
    timeout: Optional[float] = None,
) -> AnalysisResult:
    """Convenience wrapper around ``AnalysisRunner().run``."""
    return AnalysisRunner(timeout=timeout).run(comments, config)
