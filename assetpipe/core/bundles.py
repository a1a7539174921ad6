"""
Script bundles: named groups of source files built as one unit.
"""

from dataclasses import dataclass
from pathlib import Path

from assetpipe.core.files import DirectoryEntry, Entry, is_hidden
from assetpipe.core.naming import bundle_name


@dataclass(frozen=True)
class Bundle:
    """Ordered source files concatenated into one output named ``name``."""

    name: str
    sources: tuple[Path, ...]

    def concat(self) -> str:
        return "\n".join(path.read_text(encoding="utf-8") for path in self.sources)


@dataclass(frozen=True)
class ScriptAsset:
    """Script content flowing through the build steps."""

    name: str
    content: str


def bundles_for(entry: Entry, *, polyfills: bool, polyfill_suffix: str) -> list[Bundle]:
    """
    Group a scanned script entry into bundles.

    A file is its own bundle. A directory concatenates its immediate ``*.js``
    children into ``<dir>.js``; with polyfills enabled a second
    ``<dir>.polyfills.js`` bundle leaves out the files ending with
    ``polyfill_suffix``.

    Args:
        entry: File or directory matched by the script globs
        polyfills: Whether to build the polyfill-free sub-bundle
        polyfill_suffix: Filename ending marking a polyfill file

    Returns:
        Bundles in build order
    """
    if not isinstance(entry, DirectoryEntry):
        return [Bundle(entry.relative.as_posix(), (entry.path,))]

    sources = tuple(
        sorted(
            p
            for p in entry.path.glob("*.js")
            if p.is_file() and not is_hidden(p.relative_to(entry.path))
        )
    )
    bundles = [Bundle(bundle_name(entry.relative), sources)]

    if polyfills:
        without = tuple(p for p in sources if not p.name.endswith(polyfill_suffix))
        bundles.append(Bundle(bundle_name(entry.relative, polyfills=True), without))

    return bundles
