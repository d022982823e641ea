"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import Any, Callable

import pytest

BOUNDED_RUN_TIMEOUT_SECONDS = 10.0


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def run_bounded() -> Callable[[Callable[[], Any]], Any]:
    """Run a blocking callable on a worker thread and fail instead of hanging.

    The returned helper re-raises whatever the callable raised.
    """

    def _run(target: Callable[[], Any]) -> Any:
        outcome: dict[str, Any] = {}

        def _worker() -> None:
            try:
                outcome["result"] = target()
            except BaseException as error:
                outcome["error"] = error

        worker = threading.Thread(target=_worker, daemon=True)
        worker.start()
        worker.join(BOUNDED_RUN_TIMEOUT_SECONDS)
        assert not worker.is_alive(), "blocking call did not finish in time"
        if "error" in outcome:
            raise outcome["error"]
        return outcome.get("result")

    return _run
