import math
import string
from collections import namedtuple

RGB = namedtuple("RGB", ["r", "g", "b"])
HSL = namedtuple("HSL", ["h", "s", "l"])

# Tonal unit shared by every lighten/darken without an explicit amount
DEFAULT_STEP = 0.06
DEFAULT_ALPHA = 0.15

_HEX_DIGITS = frozenset(string.hexdigits)


class InvalidFormat(ValueError):
    """Raised when a string is not a 3- or 6-digit hex color."""

    def __init__(self, value, reason="expected 3 or 6 hex digits"):
        self.value = value
        super().__init__(f"Invalid hex color {value!r}: {reason}")


def clamp(value, low=0.0, high=1.0):
    return max(low, min(high, value))


def round_half_up(value):
    """Round to the nearest integer, ties going up (127.5 -> 128)."""
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_color):
    if not isinstance(hex_color, str):
        raise InvalidFormat(hex_color, "not a string")
    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(digits) not in (3, 6):
        raise InvalidFormat(hex_color)
    if not all(c in _HEX_DIGITS for c in digits):
        raise InvalidFormat(hex_color, "contains non-hex characters")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return RGB(*(int(digits[i : i + 2], 16) for i in (0, 2, 4)))


def rgb_to_hex(rgb):
    r, g, b = (int(clamp(c, 0, 255)) for c in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_to_hsl(rgb):
    """Convert an RGB triple to HSL with every component in [0, 1].

    Hue is a fraction of a turn, not degrees. Achromatic colors get
    hue 0 and saturation 0.
    """
    r, g, b = (c / 255 for c in rgb)
    mx, mn = max(r, g, b), min(r, g, b)
    l = (mx + mn) / 2
    if mx == mn:
        return HSL(0.0, 0.0, l)

    d = mx - mn
    s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
    if mx == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return HSL(h / 6, s, l)


def _hue_to_channel(p, q, t):
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h, s, l):
    """Convert HSL back to integer RGB channels, rounding half up."""
    h, s, l = h % 1.0, clamp(s), clamp(l)
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)
    return RGB(*(round_half_up(c * 255) for c in (r, g, b)))


def _adjust_lightness(hex_color, delta):
    h, s, l = rgb_to_hsl(hex_to_rgb(hex_color))
    return rgb_to_hex(hsl_to_rgb(h, s, clamp(l + delta)))


def lighten(hex_color, amount=DEFAULT_STEP):
    """Raise HSL lightness by ``amount``, saturating at white."""
    return _adjust_lightness(hex_color, clamp(amount))


def darken(hex_color, amount=DEFAULT_STEP):
    """Lower HSL lightness by ``amount``, saturating at black."""
    return _adjust_lightness(hex_color, -clamp(amount))


def opacity_to_hex(opacity):
    """Convert 0.0-1.0 opacity to an uppercase hex byte (00-FF)."""
    return f"{round_half_up(clamp(opacity) * 255):02X}"


def alpha(hex_color, amount=DEFAULT_ALPHA):
    """Return ``hex_color`` as 8-digit #RRGGBBAA with the given opacity."""
    return rgb_to_hex(hex_to_rgb(hex_color)) + opacity_to_hex(amount)


def is_dark_color(hex_color):
    return rgb_to_hsl(hex_to_rgb(hex_color)).l < 0.5
