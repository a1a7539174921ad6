"""
SVG optimization.
"""

from xml.parsers.expat import ExpatError

from scour import scour

from assetpipe.core.files import scan_files
from assetpipe.pipeline.context import BuildContext
from assetpipe.pipeline.tasks import TaskError
from assetpipe.utils.logging import logger


def scour_options():
    """Options for scour, close to svgo's default preset."""
    options = scour.sanitizeOptions()
    options.strip_comments = True
    options.remove_metadata = True
    options.remove_descriptive_elements = True
    options.strip_xml_prolog = True
    options.shorten_ids = True
    options.indent_type = "none"
    options.newlines = False
    options.quiet = True
    return options


def minify_svg(svg: str) -> str:
    return scour.scourString(svg, scour_options())


def build_svgs(ctx: BuildContext) -> None:
    """Minify each SVG into the SVG output directory."""
    if not ctx.settings.svgs:
        return

    paths = ctx.paths.svgs
    output_dir = ctx.resolve(paths.output)

    for entry in scan_files(ctx.root, paths.input):
        try:
            svg = minify_svg(entry.path.read_text(encoding="utf-8"))
        except (ExpatError, ValueError) as e:
            logger.error(f"Failed to minify {entry.path}: {e}")
            raise TaskError(f"Failed to minify {entry.path.name}") from e

        target = output_dir / entry.relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(svg, encoding="utf-8")
        logger.info(f"Created {target}")
