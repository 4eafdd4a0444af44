"""
Static color and size reference data for the bangle catalog.

These tables are process-wide reference data; they are exposed as read-only
mappings and tuples so no caller can alter them at runtime.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

# Neutral gray used for unrecognized color names
FALLBACK_HEX = "#888888"

# Name given to colors that only carry a hex value
CUSTOM_COLOR_NAME = "Custom"

# Canonical name -> hex lookup, keyed by lowercased name
COLOR_MAP: Mapping[str, str] = MappingProxyType({
    "red": "#dc2626",
    "orange": "#ea580c",
    "yellow": "#eab308",
    "green": "#16a34a",
    "lime": "#65a30d",
    "blue": "#2563eb",
    "pink": "#db2777",
    "purple": "#9333ea",
    "gold": "#f59e0b",
    "silver": "#94a3b8",
    "black": "#1f2937",
    "white": "#f9fafb",
    "brown": "#92400e",
    "cyan": "#06b6d4",
    "indigo": "#4f46e5",
    "rose": "#f43f5e",
    "teal": "#14b8a6",
    "violet": "#8b5cf6",
    "radium": "#00c76a",
    "wine": "#722f37",
    "jamuni": "#5b2b6f",
    "lavender": "#c8b7e8",
    "peacock": "#0f4c5c",
    "pista": "#b5d99c",
    "surf": "#30aadd",
    "sentro": "#3ba99c",
    "parrot": "#80c904",
    "strawberry": "#e83f6f",
    "mehendi": "#7a9a01",
    "peach": "#ffb07c",
    "ferozi": "#0fc7c7",
    "turquoise": "#40e0d0",
    "carrot": "#ed6a1f",
    "onion": "#b56576",
    "grey": "#9ca3af",
    "rose gold": "#ff9500",
    "rani": "#c71585",
    "navy blue": "#1d3557",
    "kishmashi": "#c9b164",
    "dhaani": "#b5ce5a",
    "c green": "#2e8b57",
    "olive": "#00ffbf",
    "maroon": "#800000",
    "navy": "#000080",
    "dark multi color": "#4b5563",
    "light multi color": "#e5e7eb",
})

# Image swatches for non-solid colors, keyed by lowercased name
COLOR_SWATCH_IMAGES: Mapping[str, str] = MappingProxyType({
    "dark multi color": "/DarkMulti.jpg",
    "light multi color": "/LightMulti.jpg",
})

# Master palette in display order: (name, hex, swatch image or None)
DEFAULT_COLORS: Tuple[Tuple[str, str, object], ...] = (
    ("Red", "#dc2626", None),
    ("Orange", "#ea580c", None),
    ("Yellow", "#eab308", None),
    ("Green", "#16a34a", None),
    ("Lime", "#65a30d", None),
    ("Blue", "#2563eb", None),
    ("Pink", "#db2777", None),
    ("Radium", "#00c76a", None),
    ("Wine", "#722f37", None),
    ("Jamuni", "#5b2b6f", None),
    ("Lavender", "#c8b7e8", None),
    ("Peacock", "#0f4c5c", None),
    ("Pista", "#b5d99c", None),
    ("Surf", "#30aadd", None),
    ("Sentro", "#3ba99c", None),
    ("Parrot", "#80c904", None),
    ("Strawberry", "#e83f6f", None),
    ("Mehendi", "#7a9a01", None),
    ("Gold", "#f59e0b", None),
    ("Carrot", "#ed6a1f", None),
    ("Onion", "#b56576", None),
    ("White", "#f9fafb", None),
    ("Grey", "#9ca3af", None),
    ("Rose Gold", "#ff9500", None),
    ("Rani", "#c71585", None),
    ("Navy Blue", "#1d3557", None),
    ("Kishmashi", "#c9b164", None),
    ("Dhaani", "#b5ce5a", None),
    ("C Green", "#2e8b57", None),
    ("Olive", "#00ffbf", None),
    ("Black", "#1f2937", None),
    ("Peach", "#ffb07c", None),
    ("Ferozi", "#0fc7c7", None),
    ("Purple", "#9333ea", None),
    ("Dark multi color", "#4b5563", "/DarkMulti.jpg"),
    ("Light multi color", "#e5e7eb", "/LightMulti.jpg"),
)

# Bangle sizes in catalog order
DEFAULT_SIZES: Tuple[str, ...] = ("2.2", "2.4", "2.6", "2.8", "2.10")
