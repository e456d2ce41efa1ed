# No dependencies
from enum import Enum

class UnitTag(str, Enum):
    NONE = ""
    DEG = "deg"
    PERCENT = "%"

def unit_text(tag: "UnitTag | str | None") -> str | None:
    """Return the plain text of a unit tag, or None for a unitless value."""
    if isinstance(tag, UnitTag):
        tag = tag.value
    return tag or None

# Node scale of each channel: r, g, b in 0..255, h in degrees, s and l in
# percent, alpha in 0..1.
CHANNEL_MAX = 255
HUE_360 = 360.0
PERCENT_MAX = 100.0
ALPHA_MAX = 1.0

max_non_hue = {
    "rgba": CHANNEL_MAX,
    "hsla": PERCENT_MAX,
}

