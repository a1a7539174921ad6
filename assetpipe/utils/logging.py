"""
Shared logging configuration for build tasks.

Build tasks run on worker threads, so each line carries a timestamp the way
front-end task runners print them.
"""

import logging

logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
    handlers=[logging.StreamHandler()],
)

# The dev server logs every static file request otherwise
logging.getLogger("tornado.access").setLevel(logging.WARNING)

logger = logging.getLogger("assetpipe")
