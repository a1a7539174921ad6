"""Tests for glob expansion."""

from pathlib import Path, PurePosixPath

from assetpipe.core.files import (
    DirectoryEntry,
    FileEntry,
    expand_braces,
    glob_base,
    scan,
    scan_files,
)
from tests.helpers import write


def test_expand_braces():
    """Test brace alternatives expand in order."""
    assert expand_braces("src/**/*.{scss,sass}") == ["src/**/*.scss", "src/**/*.sass"]
    assert expand_braces("src/*.js") == ["src/*.js"]
    assert expand_braces("{a,b}/{c,d}") == ["a/c", "a/d", "b/c", "b/d"]


def test_glob_base():
    """Test glob base stops at the first wildcard segment."""
    assert glob_base("src/js/*") == PurePosixPath("src/js")
    assert glob_base("src/sass/**/*.{scss,sass}") == PurePosixPath("src/sass")
    assert glob_base("src/copy/index.html") == PurePosixPath("src/copy")


def test_scan_tags_files_and_directories(project):
    """Test scan distinguishes files from directories."""
    entries = scan(project, ["src/js/*"])
    assert entries == [
        DirectoryEntry(project / "src/js/app", Path("app")),
        FileEntry(project / "src/js/main.js", Path("main.js")),
    ]


def test_scan_relative_to_glob_base(project):
    """Test relative paths are taken from the glob base."""
    files = scan_files(project, ["src/copy/**/*"])
    assert [f.relative for f in files] == [Path("img/logo.txt"), Path("index.html")]


def test_scan_negation(project):
    """Test ! patterns remove matches."""
    files = scan_files(project, ["src/js/app/*.js", "!src/js/app/*.polyfill.js"])
    assert [f.path.name for f in files] == ["a.js"]


def test_scan_braces(tmp_path):
    """Test brace patterns match every alternative once."""
    write(tmp_path / "src/sass/a.scss")
    write(tmp_path / "src/sass/nested/b.sass")
    files = scan_files(tmp_path, ["src/sass/**/*.{scss,sass}"])
    assert [f.relative for f in files] == [Path("a.scss"), Path("nested/b.sass")]


def test_scan_no_matches(tmp_path):
    """Test missing inputs give no entries."""
    assert scan(tmp_path, ["src/svg/*.svg"]) == []


def test_scan_skips_dotfiles(project):
    """Test wildcards do not match dotfiles or dot-directories."""
    write(project / "src/copy/.DS_Store", "junk")
    write(project / "src/copy/.cache/page.html", "cached")
    write(project / "src/js/.eslintrc.js", "module.exports = {};")

    copied = scan_files(project, ["src/copy/**/*"])
    assert [f.relative for f in copied] == [Path("img/logo.txt"), Path("index.html")]
    assert [e.relative for e in scan(project, ["src/js/*"])] == [Path("app"), Path("main.js")]


def test_scan_dot_pattern_matches_dotfiles(project):
    """Test a pattern naming a dot segment still matches it."""
    write(project / "src/copy/.htaccess", "Deny from all")
    files = scan_files(project, ["src/copy/.htaccess", "src/copy/.*"])
    assert [f.relative for f in files] == [Path(".htaccess")]
