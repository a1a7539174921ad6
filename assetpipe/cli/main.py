"""
Main CLI entry point for assetpipe.
"""

import click

from assetpipe import __version__


@click.group()
@click.version_option(version=__version__)
def cli():
    """Front-end asset build system."""
    pass


@cli.group()
def build():
    """Asset build commands."""
    pass


@build.command()
def clean():
    """Remove the output directory (dist/)."""
    from assetpipe.operations.clean import clean_dist
    from assetpipe.pipeline.runner import run

    run(clean_dist)


@build.command()
def scripts():
    """Bundle, transpile and minify scripts."""
    from assetpipe.operations.scripts import build_scripts
    from assetpipe.pipeline.runner import run

    run(build_scripts)


@build.command()
def lint():
    """Lint script sources."""
    from assetpipe.operations.scripts import lint_scripts
    from assetpipe.pipeline.runner import run

    run(lint_scripts)


@build.command()
def styles():
    """Compile, prefix and minify Sass."""
    from assetpipe.operations.styles import build_styles
    from assetpipe.pipeline.runner import run

    run(build_styles)


@build.command()
def svgs():
    """Minify SVG files."""
    from assetpipe.operations.svgs import build_svgs
    from assetpipe.pipeline.runner import run

    run(build_svgs)


@build.command()
def copy():
    """Copy static files."""
    from assetpipe.operations.copy import copy_files
    from assetpipe.pipeline.runner import run

    run(copy_files)


@build.command()
def all():
    """Run the complete build pipeline."""
    from assetpipe.pipeline.runner import default_pipeline, run

    run(default_pipeline())


@cli.command()
def watch():
    """Build, serve dist/ with live reload and rebuild on changes."""
    from assetpipe.pipeline.runner import run, watch_pipeline

    run(watch_pipeline())


if __name__ == "__main__":
    cli()
