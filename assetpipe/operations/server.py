"""
Dev server, browser reload and source watching.
"""

import time
from collections.abc import Callable

from livereload.watcher import Watcher

from assetpipe.pipeline.context import BuildContext
from assetpipe.utils.logging import logger

POLL_INTERVAL = 1.0


def start_server(ctx: BuildContext) -> None:
    """Start serving the output directory."""
    if not ctx.settings.reload:
        return
    ctx.server.start(ctx.resolve(ctx.paths.reload))


def reload_browser(ctx: BuildContext) -> None:
    """Tell connected browsers to reload."""
    if not ctx.settings.reload:
        return
    ctx.server.reload()


def poll(
    watcher: Watcher,
    *,
    interval: float = POLL_INTERVAL,
    max_polls: int | None = None,
) -> None:
    """Check the watcher for changes every ``interval`` seconds."""
    polls = 0
    while max_polls is None or polls < max_polls:
        watcher.examine()
        polls += 1
        time.sleep(interval)


def watch_source(
    ctx: BuildContext,
    on_change: Callable[[], None],
    *,
    watcher_factory: Callable[[], Watcher] = Watcher,
    interval: float = POLL_INTERVAL,
    max_polls: int | None = None,
) -> None:
    """
    Call ``on_change`` whenever a file under the input root changes.

    With the dev server running, its event loop does the watching and
    serving; otherwise the input root is polled. Blocks either way.
    """
    source = ctx.resolve(ctx.paths.input)
    logger.info(f"Watching {source}/ for changes")

    if ctx.server.running:
        ctx.server.watch(source, on_change)
        ctx.server.serve()
        return

    watcher = watcher_factory()
    watcher.watch(str(source), on_change)
    poll(watcher, interval=interval, max_polls=max_polls)
