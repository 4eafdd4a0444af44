"""
Catalog reports package.
"""
from bangle_storefront.reports.stock_urgency_report import StockUrgencyReport
from bangle_storefront.reports.last_few_left_report import LastFewLeftReport
from bangle_storefront.reports.color_palette_report import ColorPaletteReport
