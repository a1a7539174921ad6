"""Shared pytest fixtures."""

import subprocess

import pytest

from assetpipe.core.server import DevServer
from assetpipe.pipeline.context import BuildContext
from tests.helpers import SVG, write


class FakeServer:
    """Stands in for livereload.Server."""

    def __init__(self):
        self.watched = []
        self.served = None

    def watch(self, path, func=None, delay=None):
        self.watched.append((path, func, delay))

    def serve(self, **kwargs):
        self.served = kwargs


@pytest.fixture
def project(tmp_path):
    """A project tree with one asset of every kind."""
    write(tmp_path / "src/js/app/a.js", "var a = 1;\n// comment\nconsole.log(a);\n")
    write(tmp_path / "src/js/app/b.polyfill.js", "window.b = function () { return 2; };\n")
    write(tmp_path / "src/js/main.js", "function main() {\n  return 'main';\n}\n")
    write(tmp_path / "src/sass/main.scss", "$c: red;\n@import 'colors';\n.a {\n  color: $c;\n}\n")
    write(tmp_path / "src/sass/_colors.scss", ".b { color: blue; }\n")
    write(tmp_path / "src/svg/icon.svg", SVG)
    write(tmp_path / "src/copy/index.html", "<html><body>hi</body></html>\n")
    write(tmp_path / "src/copy/img/logo.txt", "logo\n")
    return tmp_path


@pytest.fixture
def fake_server():
    return FakeServer()


@pytest.fixture
def make_context(project, fake_server):
    """Build a context rooted at the project with the given settings."""

    def factory(settings=None):
        kwargs = {"root": project, "server": DevServer(3000, lambda: fake_server)}
        if settings is not None:
            kwargs["settings"] = settings
        return BuildContext(**kwargs)

    return factory


@pytest.fixture
def passthrough_tools(monkeypatch):
    """Replace the node tools with passthroughs and a silent linter."""

    def run_filter(cmd, source, cwd=None):
        return source

    def run_command(cmd, description=None, **kwargs):
        return subprocess.CompletedProcess(cmd, 0, "", "")

    monkeypatch.setattr("assetpipe.operations.scripts.run_filter", run_filter)
    monkeypatch.setattr("assetpipe.operations.styles.run_filter", run_filter)
    monkeypatch.setattr("assetpipe.operations.scripts.run_command", run_command)
