"""
Task composition.

A task is any callable taking a BuildContext. series() and parallel() build
composite tasks out of smaller ones.
"""

import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed

from assetpipe.pipeline.context import BuildContext
from assetpipe.utils.logging import logger

Task = Callable[[BuildContext], None]


class TaskError(RuntimeError):
    """A build task failed."""


def task_name(task: Task) -> str:
    return getattr(task, "__name__", repr(task))


def run_task(task: Task, ctx: BuildContext) -> None:
    """Run one task, logging its start, duration and failure."""
    name = task_name(task)
    logger.info(f"Starting '{name}'")
    start = time.perf_counter()
    try:
        task(ctx)
    except Exception:
        logger.error(f"'{name}' errored after {time.perf_counter() - start:.2f} s")
        raise
    logger.info(f"Finished '{name}' after {time.perf_counter() - start:.2f} s")


def series(*tasks: Task) -> Task:
    """Compose tasks to run one after another, stopping at the first failure."""

    def run_series(ctx: BuildContext) -> None:
        for task in tasks:
            run_task(task, ctx)

    run_series.__name__ = "<series>"
    return run_series


def parallel(*tasks: Task) -> Task:
    """
    Compose tasks to run concurrently.

    Every task runs to completion even when a sibling fails; failures are
    reported together once all have finished.
    """

    def run_parallel(ctx: BuildContext) -> None:
        failures: list[str] = []
        with ThreadPoolExecutor(max_workers=len(tasks) or 1) as executor:
            futures = {executor.submit(run_task, task, ctx): task for task in tasks}
            for future in as_completed(futures):
                name = task_name(futures[future])
                try:
                    future.result()
                except Exception as e:
                    logger.error(f"{name} failed: {e}")
                    failures.append(name)

        if failures:
            raise TaskError(f"{len(failures)} task(s) failed: {', '.join(sorted(failures))}")

    run_parallel.__name__ = "<parallel>"
    return run_parallel
