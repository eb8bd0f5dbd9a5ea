"""
Cloudflare Pages `_headers` policy for the built site.
"""

from pathlib import Path
from typing import Union


HEADERS_FILENAME = '_headers'

HEADERS_CONTENT = """# Cache images for 1 year
/pages/*
  Cache-Control: public, max-age=31536000, immutable

# Cache HTML for 1 hour
/*.html
  Cache-Control: public, max-age=3600

# Enable compression
/*
  X-Content-Type-Options: nosniff
  X-Frame-Options: DENY
  X-XSS-Protection: 1; mode=block
"""


def write_headers_file(build_dir: Union[str, Path]) -> Path:
    """Write the fixed header rules to build_dir/_headers."""
    path = Path(build_dir) / HEADERS_FILENAME
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(HEADERS_CONTENT)
    return path
