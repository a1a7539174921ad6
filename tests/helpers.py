"""Helpers for building project trees in tests."""


def write(path, text=""):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


SVG = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    "<!-- exported icon -->\n"
    '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">\n'
    "  <metadata>generator</metadata>\n"
    '  <rect width="10" height="10" fill="#ff0000"/>\n'
    "</svg>\n"
)
