"""
Output naming conventions.
"""

from pathlib import PurePath

MIN_SUFFIX = ".min"
POLYFILLS_SUFFIX = ".polyfills"


def min_name(name: str) -> str:
    """
    Insert the ``.min`` marker before the last extension.

    >>> min_name("app.polyfills.js")
    'app.polyfills.min.js'
    """
    path = PurePath(name)
    return str(path.with_name(f"{path.stem}{MIN_SUFFIX}{path.suffix}"))


def bundle_name(relative: PurePath, *, polyfills: bool = False) -> str:
    """Script bundle filename for a source directory."""
    suffix = POLYFILLS_SUFFIX if polyfills else ""
    return f"{relative.as_posix()}{suffix}.js"
