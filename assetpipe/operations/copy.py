"""
Static file copying.
"""

import shutil

from assetpipe.core.files import scan_files
from assetpipe.pipeline.context import BuildContext
from assetpipe.utils.logging import logger


def copy_files(ctx: BuildContext) -> None:
    """Copy static files to the output root, keeping their relative paths."""
    if not ctx.settings.copy:
        return

    paths = ctx.paths.copy
    output_dir = ctx.resolve(paths.output)
    files = scan_files(ctx.root, paths.input)

    for entry in files:
        target = output_dir / entry.relative
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(entry.path, target)

    logger.info(f"Copied {len(files)} files to {output_dir}/")
