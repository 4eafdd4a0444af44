"""
Color palette report: the merged display palette with product usage.
"""
from collections import Counter
import pandas as pd
from bangle_storefront.reports.base_report import BaseReport
from bangle_storefront.colors.normalizer import parse_colors, merge_palette
from bangle_storefront.utils.logging_config import get_logger

logger = get_logger(__name__)

OUTPUT_COLUMNS = ['name', 'hex', 'swatch_image', 'product_count']


class ColorPaletteReport(BaseReport):
    """
    Merges every product's colors into the master palette and counts how
    many products offer each color.
    """
    
    name = "color_palette"
    
    def build(self, catalog_data: pd.DataFrame) -> pd.DataFrame:
        configured = []
        usage = Counter()
        
        if catalog_data is not None and 'available_colors' in catalog_data.columns:
            for raw_colors in catalog_data['available_colors']:
                colors = parse_colors(raw_colors)
                configured.extend(colors)
                # One count per product, however often it repeats a color
                usage.update({color.key for color in colors})
        
        palette = merge_palette(configured)
        rows = [
            {
                'name': swatch.name,
                'hex': swatch.hex,
                'swatch_image': swatch.swatch_image or "",
                'product_count': usage.get(swatch.key, 0),
            }
            for swatch in palette
        ]
        logger.info(f"Palette has {len(rows)} colors, {len(usage)} used by products.")
        return pd.DataFrame(rows, columns=OUTPUT_COLUMNS)
