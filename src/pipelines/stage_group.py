"""Structured concurrency for pipeline stages.

This module runs all but the last stage of a pipeline on their own
threads and the last stage in the caller. The first stage error aborts
every channel of the group so blocked siblings wake up, and is raised
in the caller as PipelineError once all stages have stopped.
"""

from __future__ import annotations

import threading
from typing import Callable, Sequence

from channels.channel import Channel
from core.errors import PipelineError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

StageTarget = Callable[[], None]


class StageGroup:
    """Run pipeline stages concurrently and collect the first failure."""

    def __init__(self, pipeline_name: str, channels: Sequence[Channel]) -> None:
        self._pipeline_name = pipeline_name
        self._channels = tuple(channels)
        self._lock = threading.Lock()
        self._threads: list[threading.Thread] = []
        self._failure: tuple[str, Exception] | None = None

    @property
    def failed(self) -> bool:
        """Whether any stage has failed so far."""
        with self._lock:
            return self._failure is not None

    def spawn(self, stage_name: str, target: StageTarget) -> None:
        """Start one stage on its own daemon thread.

        Args:
            stage_name: Stage label used in logs and errors.
            target: Zero-argument callable running the stage to completion.
        """
        thread = threading.Thread(
            target=self._run_guarded,
            args=(stage_name, target),
            name=f"{self._pipeline_name}.{stage_name}",
            daemon=True,
        )
        self._threads.append(thread)
        thread.start()

    def run_final(self, stage_name: str, target: StageTarget) -> None:
        """Run the last stage in the caller, then join spawned stages.

        Args:
            stage_name: Stage label used in logs and errors.
            target: Zero-argument callable running the stage to completion.

        Raises:
            PipelineError: If any stage of the group failed.
        """
        self._run_guarded(stage_name, target)
        self._join()
        with self._lock:
            failure = self._failure
        if failure is None:
            return
        failed_stage, error = failure
        raise PipelineError(
            self._pipeline_name,
            failed_stage,
            f"Pipeline '{self._pipeline_name}' failed in stage '{failed_stage}': {error}",
        ) from error

    def _run_guarded(self, stage_name: str, target: StageTarget) -> None:
        try:
            target()
        except Exception as error:
            self._record_failure(stage_name, error)

    def _record_failure(self, stage_name: str, error: Exception) -> None:
        with self._lock:
            if self._failure is not None:
                return
            self._failure = (stage_name, error)
        _LOGGER.error(
            "pipeline_stage_failed",
            pipeline=self._pipeline_name,
            stage=stage_name,
            error_type=type(error).__name__,
            error=str(error),
        )
        for channel in self._channels:
            channel.abort(error)

    def _join(self) -> None:
        for thread in self._threads:
            thread.join()
