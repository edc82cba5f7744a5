"""
Menu bar icon for ProtectSight.

Uses assets/menu_icon.png when it ships with the app. Otherwise an eye
glyph is drawn with Pillow as a macOS template image (black on transparent,
the system recolours it for light/dark menu bars) and cached in the user
data directory.
"""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw

import config

logger = logging.getLogger(__name__)


def render_eye_icon(size: int = config.MENU_ICON_SIZE) -> Image.Image:
    """
    Draw an eye outline with a filled pupil.

    Args:
        size: Edge length in pixels of the square RGBA image.

    Returns:
        The rendered template image.
    """
    image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)

    stroke = max(2, size // 12)
    margin = stroke
    top = size // 4
    bottom = size - size // 4

    # Almond outline: two arcs meeting at the eye corners
    arc_box_height = (bottom - top) * 2
    draw.arc(
        [margin, top, size - margin, top + arc_box_height],
        start=200, end=340, fill=(0, 0, 0, 255), width=stroke,
    )
    draw.arc(
        [margin, bottom - arc_box_height, size - margin, bottom],
        start=20, end=160, fill=(0, 0, 0, 255), width=stroke,
    )

    pupil = size // 6
    center = size // 2
    draw.ellipse(
        [center - pupil, center - pupil, center + pupil, center + pupil],
        fill=(0, 0, 0, 255),
    )
    return image


def ensure_menu_icon(
    asset_path: Path = config.MENU_ICON_ASSET,
    cache_path: Path = config.GENERATED_MENU_ICON,
) -> Optional[str]:
    """
    Get the menu bar icon path, rendering the fallback eye if needed.

    Returns:
        Path string for rumps, or None to fall back to a text title.
    """
    if asset_path.exists():
        return str(asset_path)
    if cache_path.exists():
        return str(cache_path)

    try:
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        render_eye_icon().save(cache_path, format="PNG")
        logger.debug(f"Rendered menu bar icon to {cache_path}")
        return str(cache_path)
    except OSError as e:
        logger.warning(f"Could not write menu bar icon: {e}")
        return None
