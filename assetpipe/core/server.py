"""
Live-reload development server.

Wraps livereload's Server so the rest of the build sees a two-state machine:
STOPPED until start(), RUNNING afterwards until the process exits.
"""

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from livereload import Server
from livereload.handlers import LiveReloadHandler
from livereload.watcher import Watcher

from assetpipe.utils.logging import logger


class ServerState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class RebuildWatcher(Watcher):
    """
    Polling watcher that runs its tasks but never asks for a reload.

    livereload reloads browsers whenever examine() reports a changed path.
    Tasks here rebuild first and reload explicitly once they are done.
    """

    def examine(self):
        super().examine()
        return None, None


def livereload_server() -> Server:
    return Server(watcher=RebuildWatcher())


class DevServer:
    """Static file server that tells connected browsers to reload."""

    def __init__(
        self,
        port: int,
        server_factory: Callable[[], Server] = livereload_server,
    ):
        self.port = port
        self.state = ServerState.STOPPED
        self.root: Path | None = None
        self._server_factory = server_factory
        self._server: Server | None = None

    @property
    def running(self) -> bool:
        return self.state is ServerState.RUNNING

    def start(self, root: Path) -> None:
        """Configure the server to serve ``root``."""
        if self.running:
            logger.warning(f"Dev server already serving {self.root}/")
            return
        self._server = self._server_factory()
        self.root = root
        self.state = ServerState.RUNNING
        logger.info(f"Dev server serving {root}/ on http://localhost:{self.port}")

    def watch(self, path: Path, func: Callable[[], None]) -> None:
        """
        Run ``func`` when anything under ``path`` changes.

        Changes alone never reload browsers; ``func`` is expected to call
        reload() once its rebuild has finished.
        """
        self._require_running()
        self._server.watch(str(path), func)

    def serve(self) -> None:
        """Serve until interrupted. Blocks."""
        self._require_running()
        self._server.serve(port=self.port, root=str(self.root), open_url_delay=1)

    def reload(self) -> None:
        """Tell connected browsers to reload. No effect unless running."""
        if not self.running:
            logger.debug("Dev server not running, reload skipped")
            return
        if not LiveReloadHandler.waiters:
            logger.debug("No browsers connected, reload skipped")
            return
        LiveReloadHandler.reload_waiters(path="*")

    def _require_running(self) -> None:
        if not self.running:
            raise RuntimeError("Dev server has not been started")
