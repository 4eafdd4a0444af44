"""
Color normalization package.
"""
from bangle_storefront.colors.normalizer import (
    ColorSwatch,
    parse_color,
    parse_colors,
    get_color_hex,
    is_valid_hex,
    lighten_color,
    get_swatch_style,
    default_palette,
    merge_palette,
    normalize_board_colors
)
