"""
Logging helper shared by the renderer modules and the CLI.
All diagnostic output goes to stderr so stdout stays clean for SVG/JSON.
"""

import sys


def log(msg):
    """Print a diagnostic message to stderr."""
    print(f"[dxf2svg] {msg}", file=sys.stderr, flush=True)
