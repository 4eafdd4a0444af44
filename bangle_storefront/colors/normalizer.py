"""
Color normalization for catalog data.

Stored colors arrive in several shapes because the catalog schema drifted
over time: plain names ("Red"), hex strings ("#FF0000"), JSON-encoded objects
('{"name": "Red", "hex": "#dc2626"}') and already-decoded objects. Every
shape resolves to a ColorSwatch; nothing here raises on bad input.
"""
import json
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional
import numpy as np
import pandas as pd
from bangle_storefront.config.palette_config import (
    COLOR_MAP,
    COLOR_SWATCH_IMAGES,
    CUSTOM_COLOR_NAME,
    DEFAULT_COLORS,
    FALLBACK_HEX
)
from bangle_storefront.utils.logging_config import get_logger

logger = get_logger(__name__)

HEX_PATTERN = re.compile(r'^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$')


@dataclass(frozen=True)
class ColorSwatch:
    """
    A normalized color. Identity is the lowercased name.
    """
    name: str
    hex: str
    swatch_image: Optional[str] = None
    active: bool = True
    
    @property
    def key(self) -> str:
        return self.name.lower()
    
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the stored object shape.
        
        Returns:
            Dict[str, Any]: name and hex, plus swatchImage when set and
            active only when False
        """
        data: Dict[str, Any] = {'name': self.name, 'hex': self.hex}
        if self.swatch_image:
            data['swatchImage'] = self.swatch_image
        if not self.active:
            data['active'] = False
        return data


def _with_hash(hex_value: Any) -> str:
    hex_str = str(hex_value).strip()
    return hex_str if hex_str.startswith('#') else f"#{hex_str}"


def _from_object(color: Mapping[str, Any]) -> Optional[ColorSwatch]:
    """Resolve a decoded color object, or None if it carries no hex."""
    hex_value = color.get('hex')
    name = color.get('name')
    
    if hex_value and name:
        name = str(name)
        supplied_hex = _with_hash(hex_value)
        # A recognized name wins over whatever hex was stored with it
        hex_str = COLOR_MAP.get(name.lower(), supplied_hex)
        swatch_image = color.get('swatchImage') or COLOR_SWATCH_IMAGES.get(name.lower())
        return ColorSwatch(
            name=name,
            hex=hex_str,
            swatch_image=swatch_image,
            active=color.get('active') is not False
        )
    
    if hex_value:
        return ColorSwatch(
            name=CUSTOM_COLOR_NAME,
            hex=_with_hash(hex_value),
            swatch_image=color.get('swatchImage') or None
        )
    
    return None


def _from_string(color: str) -> ColorSwatch:
    color_str = color.strip()
    lower = color_str.lower()
    swatch_image = COLOR_SWATCH_IMAGES.get(lower)
    
    if color_str.startswith('#'):
        return ColorSwatch(name=CUSTOM_COLOR_NAME, hex=color_str, swatch_image=swatch_image)
    
    if not color_str:
        return ColorSwatch(name=CUSTOM_COLOR_NAME, hex=FALLBACK_HEX)
    
    return ColorSwatch(
        name=color_str,
        hex=COLOR_MAP.get(lower, FALLBACK_HEX),
        swatch_image=swatch_image
    )


def parse_color(color: Any) -> ColorSwatch:
    """
    Parse a stored color into a ColorSwatch.
    
    Resolution order:
        1. object with name and hex (canonical hex overrides a known name)
        2. object with only hex (named "Custom")
        3. string holding a JSON object with name and hex
        4. plain string: "#..." is a literal hex named "Custom", anything else
           is a color name looked up in COLOR_MAP (gray when unknown)
    
    Args:
        color (Any): A string or a mapping
    
    Returns:
        ColorSwatch: The normalized color
    """
    if isinstance(color, ColorSwatch):
        return color
    
    if isinstance(color, Mapping):
        swatch = _from_object(color)
        if swatch is not None:
            return swatch
        # Objects with a name but no hex resolve like a plain name
        name = color.get('name')
        return _from_string(str(name)) if name else ColorSwatch(CUSTOM_COLOR_NAME, FALLBACK_HEX)
    
    if color is None:
        return ColorSwatch(name=CUSTOM_COLOR_NAME, hex=FALLBACK_HEX)
    
    color_str = str(color)
    if color_str.strip().startswith('{'):
        try:
            decoded = json.loads(color_str)
        except (ValueError, RecursionError):
            decoded = None
        if isinstance(decoded, Mapping) and decoded.get('hex') and decoded.get('name'):
            return _from_object(decoded)
    
    return _from_string(color_str)


def _is_noise(swatch: ColorSwatch) -> bool:
    # Unrecognized in every sense; a picked color that is exactly #888888 is dropped too
    return swatch.hex == FALLBACK_HEX and swatch.name == CUSTOM_COLOR_NAME


def parse_colors(colors: Any) -> List[ColorSwatch]:
    """
    Parse a stored list of colors.
    
    Args:
        colors (Any): A list, tuple, array or Series, or a JSON-encoded list
    
    Returns:
        List[ColorSwatch]: Parsed colors without "Custom" gray noise; empty for
        any other shape
    """
    if colors is None:
        return []
    
    if isinstance(colors, str):
        if not colors.strip():
            return []
        try:
            colors = json.loads(colors)
        except (ValueError, RecursionError) as e:
            logger.warning(f"Failed to parse colors: {e}")
            return []
    
    if not isinstance(colors, (list, tuple, np.ndarray, pd.Series)):
        return []
    if isinstance(colors, np.ndarray) and colors.ndim == 0:
        return []
    
    parsed = [parse_color(color) for color in colors]
    return [swatch for swatch in parsed if not _is_noise(swatch)]


def get_color_hex(color_name: Optional[str]) -> str:
    """Canonical hex for a color name, gray when unknown."""
    return COLOR_MAP.get((color_name or "").lower(), FALLBACK_HEX)


def is_valid_hex(color: Any) -> bool:
    """True for '#' followed by exactly 3 or 6 hex digits."""
    return isinstance(color, str) and HEX_PATTERN.match(color) is not None


def lighten_color(hex_color: str, percent: float = 20) -> str:
    """
    Generate a lighter shade of a color for hover effects.
    
    Args:
        hex_color (str): A "#rrggbb" or "#rgb" color
        percent (float): How much to lighten, 0-100
    
    Returns:
        str: The lightened "#rrggbb" color, or the input unchanged when it is
        not a valid hex color
    """
    if not is_valid_hex(hex_color):
        logger.debug(f"Cannot lighten invalid hex color: {hex_color!r}")
        return hex_color
    
    digits = hex_color[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    
    num = int(digits, 16)
    amount = int(math.floor(2.55 * percent + 0.5))
    channels = [(num >> 16) + amount, ((num >> 8) & 0xFF) + amount, (num & 0xFF) + amount]
    return "#" + "".join(f"{min(255, max(0, channel)):02x}" for channel in channels)


def get_swatch_style(swatch: ColorSwatch) -> Dict[str, str]:
    """
    Visual fill for a swatch: the image when there is one, else the flat hex.
    
    Args:
        swatch (ColorSwatch): The color to display
    
    Returns:
        Dict[str, str]: CSS background properties
    """
    image = swatch.swatch_image or COLOR_SWATCH_IMAGES.get(swatch.name.lower())
    if image:
        return {
            'background-image': f"url({image})",
            'background-size': "cover",
            'background-position': "center",
            'background-repeat': "no-repeat",
        }
    return {'background-color': swatch.hex}


def default_palette() -> List[ColorSwatch]:
    """The master palette as swatches, in declared order."""
    return [ColorSwatch(name, hex_str, swatch_image) for name, hex_str, swatch_image in DEFAULT_COLORS]


def merge_palette(
    colors: Iterable[Any],
    defaults: Optional[Iterable[Any]] = None
) -> List[ColorSwatch]:
    """
    Merge configured colors with the master palette for display.
    
    Entries are keyed by lowercased name and later writes win, so configured
    colors replace palette entries of the same name. Palette order comes
    first; colors missing from the palette follow, sorted by name.
    
    Args:
        colors (Iterable[Any]): Configured colors in any stored shape
        defaults (Optional[Iterable[Any]]): Master palette (DEFAULT_COLORS if None)
    
    Returns:
        List[ColorSwatch]: The merged display list
    """
    palette = default_palette() if defaults is None else [parse_color(c) for c in defaults]
    
    merged: Dict[str, ColorSwatch] = {}
    for swatch in palette:
        merged[swatch.key] = swatch
    for color in colors:
        swatch = parse_color(color)
        merged[swatch.key] = swatch
    
    palette_keys = []
    for swatch in palette:
        if swatch.key not in palette_keys:
            palette_keys.append(swatch.key)
    
    ordered = [merged[key] for key in palette_keys]
    extras = sorted(
        (swatch for key, swatch in merged.items() if key not in palette_keys),
        key=lambda swatch: swatch.name.lower()
    )
    return ordered + extras


def normalize_board_colors(colors: Optional[Iterable[Any]]) -> List[ColorSwatch]:
    """
    Colors for a selection board: first occurrence per name wins, and the
    master palette is used when nothing is configured.
    
    Args:
        colors (Optional[Iterable[Any]]): Configured colors in any stored shape
    
    Returns:
        List[ColorSwatch]: De-duplicated colors in configured order
    """
    seen = set()
    deduped = []
    for color in colors or []:
        swatch = parse_color(color)
        if swatch.key in seen:
            continue
        seen.add(swatch.key)
        deduped.append(swatch)
    
    return deduped or default_palette()
