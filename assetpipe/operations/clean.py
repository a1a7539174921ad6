"""
Clean operation.

Removes the output directory so every build starts from scratch.
"""

import shutil
from pathlib import Path

from assetpipe.pipeline.context import BuildContext
from assetpipe.pipeline.tasks import TaskError
from assetpipe.utils.logging import logger


def clean_directory(path: Path) -> None:
    """
    Delete a directory tree. A missing directory is not an error.

    Args:
        path: Path of the directory to delete
    """
    if not path.exists():
        logger.info(f"{path}/ does not exist (skipped)")
        return

    logger.info(f"Removing {path}/")
    try:
        shutil.rmtree(path)
    except OSError as e:
        logger.error(f"Failed to remove {path}/: {e}")
        raise TaskError(f"Could not remove {path}") from e
    logger.info(f"Removed {path}/")


def clean_dist(ctx: BuildContext) -> None:
    """Remove the output directory."""
    if not ctx.settings.clean:
        return
    clean_directory(ctx.resolve(ctx.paths.output))
