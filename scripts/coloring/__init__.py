"""Color assignment and gradient shading for report charts."""

from .gradient import Hsl, gradient_shades, hex_to_hsl, hsl_to_hex
from .palette import GGPLOT_PALETTE, OTHER_LABEL, REGION_COLORS, ColorTable

__all__ = [
    "ColorTable",
    "GGPLOT_PALETTE",
    "Hsl",
    "OTHER_LABEL",
    "REGION_COLORS",
    "gradient_shades",
    "hex_to_hsl",
    "hsl_to_hex",
]
