"""
Build pipeline orchestration.

Wires the build tasks into the default and watch pipelines.
"""

import sys

from assetpipe.operations.clean import clean_dist
from assetpipe.operations.copy import copy_files
from assetpipe.operations.scripts import build_scripts, lint_scripts
from assetpipe.operations.server import reload_browser, start_server, watch_source
from assetpipe.operations.styles import build_styles
from assetpipe.operations.svgs import build_svgs
from assetpipe.pipeline.context import BuildContext
from assetpipe.pipeline.tasks import Task, parallel, run_task, series
from assetpipe.utils.logging import logger


def default_pipeline() -> Task:
    """
    Clean, then run every build task in parallel.

    Build pipeline:
      1. clean    - Remove dist/
      2. parallel - scripts, lint, styles, svgs, copy
    """
    default = series(
        clean_dist,
        parallel(
            build_scripts,
            lint_scripts,
            build_styles,
            build_svgs,
            copy_files,
        ),
    )
    default.__name__ = "default"
    return default


def rebuild(ctx: BuildContext) -> None:
    """
    Run the default pipeline and reload browsers.

    A failed rebuild is logged and leaves the watcher running.
    """
    try:
        run_task(series(default_pipeline(), reload_browser), ctx)
    except Exception as e:
        logger.error(f"Rebuild failed: {e}")


def watch_pipeline() -> Task:
    """Build, start the dev server, then rebuild on every source change."""

    def watch(ctx: BuildContext) -> None:
        watch_source(ctx, lambda: rebuild(ctx))

    return series(default_pipeline(), start_server, watch)


def run(task: Task, ctx: BuildContext | None = None) -> None:
    """Run a task from the command line, exiting non-zero on failure."""
    ctx = ctx or BuildContext()
    try:
        run_task(task, ctx)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.error(f"Build failed: {e}")
        sys.exit(1)
