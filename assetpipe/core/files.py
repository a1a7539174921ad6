"""
Glob expansion for asset inputs.

Patterns follow the usual front-end conventions: ``**`` recursion,
``{a,b}`` alternatives and ``!pattern`` negation.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath

_BRACES = re.compile(r"\{([^{}]*)\}")
_WILDCARD = re.compile(r"[*?\[{]")


@dataclass(frozen=True)
class FileEntry:
    """A single file matched by a glob."""

    path: Path
    relative: Path


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory matched by a glob."""

    path: Path
    relative: Path


Entry = FileEntry | DirectoryEntry


def expand_braces(pattern: str) -> list[str]:
    """
    Expand ``{a,b}`` alternatives into separate patterns.

    >>> expand_braces("src/**/*.{scss,sass}")
    ['src/**/*.scss', 'src/**/*.sass']
    """
    match = _BRACES.search(pattern)
    if not match:
        return [pattern]

    expanded = []
    head, tail = pattern[: match.start()], pattern[match.end() :]
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


def glob_base(pattern: str) -> PurePosixPath:
    """
    Literal directory prefix of a pattern, up to its first wildcard segment.

    >>> glob_base("src/sass/**/*.scss")
    PurePosixPath('src/sass')
    """
    parts = []
    for part in PurePosixPath(pattern).parts:
        if _WILDCARD.search(part):
            break
        parts.append(part)
    else:
        # No wildcard: the pattern names a single path
        parts = parts[:-1]
    return PurePosixPath(*parts)


def is_hidden(relative: PurePath) -> bool:
    """Whether any part of a path is a dotfile or dot-directory."""
    return any(part.startswith(".") for part in relative.parts)


def _match(root: Path, pattern: str) -> dict[Path, Path]:
    literal = glob_base(pattern)
    base = root / literal
    matches = {}
    for expanded in expand_braces(pattern):
        # Wildcards skip dotfiles unless the pattern names a dot segment
        segments = PurePosixPath(expanded).parts[len(literal.parts) :]
        dot = is_hidden(PurePosixPath(*segments))
        for path in root.glob(expanded):
            relative = path.relative_to(base)
            if dot or not is_hidden(relative):
                matches[path] = relative
    return matches


def scan(root: Path, patterns: Iterable[str]) -> list[Entry]:
    """
    Expand glob patterns into file and directory entries, sorted by path.

    Args:
        root: Directory the patterns are relative to
        patterns: Glob patterns; a leading ``!`` excludes matches

    Returns:
        Matched entries with paths relative to each pattern's glob base
    """
    included: dict[Path, Path] = {}
    excluded: set[Path] = set()

    for pattern in patterns:
        if pattern.startswith("!"):
            excluded.update(_match(root, pattern[1:]))
        else:
            for path, relative in _match(root, pattern).items():
                included.setdefault(path, relative)

    entries: list[Entry] = []
    for path in sorted(included):
        if path in excluded:
            continue
        relative = included[path]
        if path.is_dir():
            entries.append(DirectoryEntry(path, relative))
        else:
            entries.append(FileEntry(path, relative))
    return entries


def scan_files(root: Path, patterns: Iterable[str]) -> list[FileEntry]:
    """Like scan(), keeping only files."""
    return [entry for entry in scan(root, patterns) if isinstance(entry, FileEntry)]
