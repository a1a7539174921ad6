"""
Input globs and output directories for each asset group.

Centralizes path definitions to avoid magic strings in individual tasks.
All values are relative to the project root.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AssetPaths:
    """Input glob patterns and output directory of one asset group."""

    input: tuple[str, ...]
    output: str


@dataclass(frozen=True)
class ScriptPaths(AssetPaths):
    polyfills: str = ".polyfill.js"


@dataclass(frozen=True)
class Paths:
    input: str = "src/"
    output: str = "dist/"
    scripts: ScriptPaths = field(
        default_factory=lambda: ScriptPaths(("src/js/*",), "dist/js/")
    )
    styles: AssetPaths = field(
        default_factory=lambda: AssetPaths(("src/sass/**/*.{scss,sass}",), "dist/css/")
    )
    svgs: AssetPaths = field(
        default_factory=lambda: AssetPaths(("src/svg/*.svg",), "dist/svg/")
    )
    copy: AssetPaths = field(
        default_factory=lambda: AssetPaths(("src/copy/**/*",), "dist/")
    )
    reload: str = "./dist/"


DEFAULT_PATHS = Paths()

# Dev server
SERVER_PORT = 3000
