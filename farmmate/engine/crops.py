from typing import Dict, Tuple

# declaration order decides which crop wins when a message names several
CROP_IDS: Tuple[str, ...] = ("maize", "rice", "yam", "cassava", "cocoa")

HARVEST_INDICATORS: Dict[str, Tuple[str, ...]] = {
    "maize":   ("Kernels hard and glossy", "Moisture content 20-25%", "Black layer formation at kernel base"),
    "rice":    ("80-85% of panicles turn yellow", "Grains firm when pressed", "Moisture content around 20%"),
    "yam":     ("Vines begin to dry and yellow", "Tubers reach mature size", "8-10 months after planting"),
    "cassava": ("Leaves yellowing and dropping", "Roots reach desired size", "8-18 months depending on variety"),
    "cocoa":   ("Pod color changes (yellow/orange for ripe)", "Main crop: Oct-Jan, Light crop: Jun-Aug", "Harvest every 2-4 weeks"),
}

def supported_crops_phrase(conjunction: str = "and") -> str:
    """'maize, rice, yam, cassava, and cocoa'"""
    return f"{', '.join(CROP_IDS[:-1])}, {conjunction} {CROP_IDS[-1]}"
