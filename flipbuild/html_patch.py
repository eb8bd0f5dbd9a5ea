"""
Template patch - Swaps the flipbook slide <img> for a responsive <picture>.

The match is an exact literal on the slide template in index.html. If the
page's template no longer contains that literal the patch does nothing.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union


logger = logging.getLogger(__name__)

SLIDE_IMG_TEMPLATE = (
    'slide.innerHTML = `<div class="slide-inner">'
    '<img src="pages/page${i}.jpg" /></div>`;'
)

PICTURE_TEMPLATE = """slide.innerHTML = `<div class="slide-inner">
        <picture>
          <source media="(max-width: 768px)" srcset="pages/page${i}-mobile.webp" type="image/webp">
          <source media="(max-width: 1024px)" srcset="pages/page${i}-tablet.webp" type="image/webp">
          <source srcset="pages/page${i}-desktop.webp" type="image/webp">
          <source media="(max-width: 768px)" srcset="pages/page${i}-mobile.jpg">
          <source media="(max-width: 1024px)" srcset="pages/page${i}-tablet.jpg">
          <img src="pages/page${i}-desktop.jpg" />
        </picture>
      </div>`;"""


def patch_slide_template(html: str) -> Tuple[str, bool]:
    """
    Replace the first occurrence of the slide <img> template.

    Returns:
        Tuple of (html, patched)
    """
    if SLIDE_IMG_TEMPLATE not in html:
        return html, False
    return html.replace(SLIDE_IMG_TEMPLATE, PICTURE_TEMPLATE, 1), True


def rewrite_index(
    html_path: Union[str, Path],
    use_optimized: bool,
    log: Optional[logging.Logger] = None
) -> bool:
    """
    Point index.html at the optimized variants.

    Line endings and undecodable bytes are preserved; apart from the patch
    the file is rewritten unchanged.

    Args:
        html_path: Built index.html
        use_optimized: Only patch when optimized variants were generated
        log: Optional logger instance

    Returns:
        True if the template was replaced
    """
    log = log or logger

    with open(html_path, 'r', encoding='utf-8', errors='surrogateescape', newline='') as f:
        html = f.read()

    patched = False
    if use_optimized:
        html, patched = patch_slide_template(html)
        if patched:
            log.info("Updated slide template to use responsive images")
        else:
            log.debug("Slide template not found, index.html left as-is")

    with open(html_path, 'w', encoding='utf-8', errors='surrogateescape', newline='') as f:
        f.write(html)

    return patched
