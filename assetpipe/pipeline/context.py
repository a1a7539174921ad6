"""
Build context passed to every task.
"""

from dataclasses import dataclass, field
from pathlib import Path

from assetpipe.config.paths import DEFAULT_PATHS, SERVER_PORT, Paths
from assetpipe.config.settings import DEFAULT_SETTINGS, Settings
from assetpipe.core.server import DevServer


@dataclass(frozen=True)
class BuildContext:
    """Settings, paths and shared resources of one build invocation."""

    settings: Settings = DEFAULT_SETTINGS
    paths: Paths = DEFAULT_PATHS
    root: Path = field(default_factory=Path.cwd)
    server: DevServer = field(default_factory=lambda: DevServer(SERVER_PORT))

    def resolve(self, path: str) -> Path:
        """Resolve a configured path against the project root."""
        return self.root / path
