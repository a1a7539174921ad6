"""
Script operations.

Bundles, transpiles, optimizes and minifies JavaScript, and lints the
sources.
"""

import subprocess
from collections.abc import Callable
from functools import partial
from pathlib import Path

import rjsmin

from assetpipe.config.toolchain import BABEL, JSHINT, OPTIMIZE_JS
from assetpipe.core.bundles import Bundle, ScriptAsset, bundles_for
from assetpipe.core.files import scan, scan_files
from assetpipe.core.naming import min_name
from assetpipe.pipeline.context import BuildContext
from assetpipe.pipeline.tasks import TaskError
from assetpipe.utils.logging import logger
from assetpipe.utils.subprocess import run_command, run_filter

Step = Callable[[ScriptAsset], ScriptAsset]


def transpile(asset: ScriptAsset, *, cwd: Path) -> ScriptAsset:
    """Transpile with Babel's preset-env."""
    content = run_filter([*BABEL, f"--filename={asset.name}"], asset.content, cwd=cwd)
    return ScriptAsset(asset.name, content)


def optimize(asset: ScriptAsset, *, cwd: Path) -> ScriptAsset:
    """Wrap eagerly invoked functions in parentheses for faster parsing."""
    return ScriptAsset(asset.name, run_filter(OPTIMIZE_JS, asset.content, cwd=cwd))


def rename_min(asset: ScriptAsset) -> ScriptAsset:
    return ScriptAsset(min_name(asset.name), asset.content)


def minify(asset: ScriptAsset) -> ScriptAsset:
    return ScriptAsset(asset.name, rjsmin.jsmin(asset.content, keep_bang_comments=False))


def write(asset: ScriptAsset, *, output_dir: Path) -> ScriptAsset:
    """Write the asset under output_dir and pass it on unchanged."""
    target = output_dir / asset.name
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(asset.content, encoding="utf-8")
    logger.info(f"Created {target}")
    return asset


def script_steps(ctx: BuildContext) -> list[Step]:
    """
    Steps applied to every bundle, in order.

    Produces an unminified and a ``.min`` file per bundle, both optimized.
    """
    output_dir = ctx.resolve(ctx.paths.scripts.output)
    return [
        partial(transpile, cwd=ctx.root),
        partial(optimize, cwd=ctx.root),
        partial(write, output_dir=output_dir),
        rename_min,
        minify,
        partial(optimize, cwd=ctx.root),
        partial(write, output_dir=output_dir),
    ]


def run_steps(asset: ScriptAsset, steps: list[Step]) -> ScriptAsset:
    for step in steps:
        asset = step(asset)
    return asset


def build_bundle(bundle: Bundle, steps: list[Step]) -> None:
    """Concatenate a bundle and run it through the script steps."""
    logger.info(f"Bundling {bundle.name} ({len(bundle.sources)} files)")
    try:
        run_steps(ScriptAsset(bundle.name, bundle.concat()), steps)
    except (subprocess.CalledProcessError, OSError) as e:
        raise TaskError(f"Failed to build {bundle.name}: {e}") from e


def build_scripts(ctx: BuildContext) -> None:
    """Build every script file and script directory bundle."""
    if not ctx.settings.scripts:
        return

    paths = ctx.paths.scripts
    steps = script_steps(ctx)
    bundles = [
        bundle
        for entry in scan(ctx.root, paths.input)
        for bundle in bundles_for(
            entry,
            polyfills=ctx.settings.polyfills,
            polyfill_suffix=paths.polyfills,
        )
    ]

    for bundle in bundles:
        if not bundle.sources:
            logger.warning(f"{bundle.name} has no sources (skipped)")
            continue
        build_bundle(bundle, steps)


def lint_scripts(ctx: BuildContext) -> None:
    """
    Lint script sources with jshint.

    Findings are advisory: they are logged as warnings and never fail the
    build.
    """
    if not ctx.settings.scripts:
        return

    files = [str(entry.path) for entry in scan_files(ctx.root, ctx.paths.scripts.input)]
    if not files:
        logger.info("No scripts to lint")
        return

    try:
        result = run_command(
            [*JSHINT, *files],
            f"Linting {len(files)} scripts",
            cwd=ctx.root,
            check=False,
        )
    except OSError as e:
        logger.warning(f"Linter unavailable: {e}")
        return

    report = (result.stdout or "").rstrip()
    if result.returncode != 0 and report:
        logger.warning(report)
    elif result.returncode != 0:
        logger.warning(f"Linter exited with status {result.returncode}")
    else:
        logger.info("No lint findings")
