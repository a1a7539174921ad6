"""
Command lines for the node tools the build delegates to.

Each command reads its source on stdin and writes the result to stdout.
They run from the project root so that npx resolves ./node_modules.
"""

NPX = ["npx", "--no-install"]

BABEL_PRESET = "@babel/preset-env"
BABEL = [*NPX, "babel", f"--presets={BABEL_PRESET}"]

OPTIMIZE_JS = [*NPX, "optimize-js"]

# autoprefixer defaults: cascade=true, remove=true
AUTOPREFIXER = [*NPX, "postcss", "--use", "autoprefixer", "--no-map"]

JSHINT = [*NPX, "jshint", "--reporter=node_modules/jshint-stylish"]
