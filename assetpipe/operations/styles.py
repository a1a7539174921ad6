"""
Stylesheet operations.

Compiles Sass, adds vendor prefixes and writes expanded and minified CSS.
"""

import subprocess
from pathlib import Path

import rcssmin
import sass

from assetpipe.config.toolchain import AUTOPREFIXER
from assetpipe.core.files import FileEntry, glob_base, scan_files
from assetpipe.core.naming import min_name
from assetpipe.pipeline.context import BuildContext
from assetpipe.pipeline.tasks import TaskError
from assetpipe.utils.logging import logger
from assetpipe.utils.subprocess import run_filter


def is_partial(entry: FileEntry) -> bool:
    """Sass partials (``_name.scss``) are only ever imported."""
    return entry.path.name.startswith("_")


def compile_stylesheet(path: Path, include_paths: list[str]) -> str:
    """
    Compile one Sass file to expanded CSS with source comments.

    Raises:
        TaskError: If the stylesheet does not compile
    """
    try:
        return sass.compile(
            filename=str(path),
            output_style="expanded",
            source_comments=True,
            include_paths=include_paths,
        )
    except sass.CompileError as e:
        logger.error(f"Sass error in {path}:\n{e}")
        raise TaskError(f"Failed to compile {path.name}") from e


def prefix(css: str, *, cwd: Path) -> str:
    """Add missing vendor prefixes and drop outdated ones."""
    try:
        return run_filter(AUTOPREFIXER, css, cwd=cwd)
    except (subprocess.CalledProcessError, OSError) as e:
        raise TaskError(f"Autoprefixer failed: {e}") from e


def minify(css: str) -> str:
    return rcssmin.cssmin(css, keep_bang_comments=False)


def write_css(target: Path, css: str) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(css, encoding="utf-8")
    logger.info(f"Created {target}")


def build_styles(ctx: BuildContext) -> None:
    """
    Compile every matched stylesheet.

    All stylesheets are compiled before anything is written, so a broken
    stylesheet leaves no output behind.
    """
    if not ctx.settings.styles:
        return

    paths = ctx.paths.styles
    output_dir = ctx.resolve(paths.output)
    include_paths = [str(ctx.root / glob_base(pattern)) for pattern in paths.input]

    entries = [e for e in scan_files(ctx.root, paths.input) if not is_partial(e)]
    logger.info(f"Compiling {len(entries)} stylesheets")

    compiled = []
    for entry in entries:
        css = compile_stylesheet(entry.path, include_paths)
        name = entry.relative.with_suffix(".css").as_posix()
        compiled.append((name, prefix(css, cwd=ctx.root)))

    for name, css in compiled:
        write_css(output_dir / name, css)
        write_css(output_dir / min_name(name), minify(css))
