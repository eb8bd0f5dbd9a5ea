"""
Main entry point for running the package as a module.

Usage:
    python -m flipbuild optimize ./pages ./optimized-images
    python -m flipbuild build-cloudflare
    python -m flipbuild report -m optimized-images/image-manifest.json
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
