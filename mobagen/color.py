"""RGBA colours as bytes (``Color32``) and as floats (``Colorf``)."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from mobagen.rng import range_int


def _to_byte(value: float) -> int:
    """Truncate a float channel to an int and keep it inside 0..255."""
    return min(255, max(0, int(value)))


@dataclass(frozen=True)
class Color32:
    """A colour with one byte per channel; alpha 255 is opaque.

    Packed form is ``a << 24 | b << 16 | g << 8 | r``.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    TRANSPARENT_BLACK: ClassVar[Color32]
    TRANSPARENT: ClassVar[Color32]
    BLACK: ClassVar[Color32]
    WHITE: ClassVar[Color32]
    RED: ClassVar[Color32]
    LIME: ClassVar[Color32]
    BLUE: ClassVar[Color32]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an integer in 0..255, got {value!r}")

    @classmethod
    def from_packed(cls, packed: int) -> Color32:
        """Build a colour from its 32-bit packed form."""
        packed &= 0xFFFFFFFF
        return cls(
            r=packed & 0xFF,
            g=(packed >> 8) & 0xFF,
            b=(packed >> 16) & 0xFF,
            a=(packed >> 24) & 0xFF,
        )

    def packed(self) -> int:
        """The 32-bit packed form of this colour."""
        return self.a << 24 | self.b << 16 | self.g << 8 | self.r

    def __getitem__(self, index: int) -> int:
        """Channels by index: 0 alpha, 1 red, 2 green, 3 blue; 4 is alpha again."""
        if index < 0 or index > 4:
            raise IndexError("Out of color range")
        if index == 1:
            return self.r
        if index == 2:
            return self.g
        if index == 3:
            return self.b
        return self.a

    @classmethod
    def random(cls, low: int = 0, high: int = 255) -> Color32:
        """An opaque colour with every channel drawn from ``low..high``."""
        return cls(range_int(low, high), range_int(low, high), range_int(low, high), 255)

    @classmethod
    def lerp(cls, c1: Color32, c2: Color32, t: float) -> Color32:
        """Opaque colour interpolated channel by channel from ``c1`` to ``c2``."""

        def mix(a: int, b: int) -> int:
            if t == 1:
                return b
            return _to_byte(a + t * (b - a))

        return cls(mix(c1.r, c2.r), mix(c1.g, c2.g), mix(c1.b, c2.b))

    def light(self) -> Color32:
        """Opaque colour halfway between this one and white."""
        return Color32((self.r + 255) // 2, (self.g + 255) // 2, (self.b + 255) // 2)

    def dark(self) -> Color32:
        """Opaque colour with every channel halved."""
        return Color32(self.r // 2, self.g // 2, self.b // 2)

    def to_colorf(self) -> Colorf:
        """The same colour with channels scaled to 0..1."""
        return Colorf(self.r / 255, self.g / 255, self.b / 255, self.a / 255)


@dataclass(frozen=True)
class Colorf:
    """A colour with float channels, nominally in 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_packed(cls, packed: int) -> Colorf:
        """Read alpha from the top byte, red from the next, green from the next.

        Blue repeats the green byte.
        """
        packed &= 0xFFFFFFFF
        return cls(
            r=((packed >> 16) & 0xFF) / 255,
            g=((packed >> 8) & 0xFF) / 255,
            b=((packed >> 8) & 0xFF) / 255,
            a=((packed >> 24) & 0xFF) / 255,
        )

    def to_color32(self) -> Color32:
        """Scale each channel by 255, truncating and clamping into a byte."""
        return Color32(
            _to_byte(self.r * 255),
            _to_byte(self.g * 255),
            _to_byte(self.b * 255),
            _to_byte(self.a * 255),
        )

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, hdr: bool = True) -> Colorf:
        """Convert hue, saturation and value to an opaque RGB colour.

        Without ``hdr`` the result is clamped into 0..1. Hues whose sector
        falls outside -1..6 raise ``ValueError``.
        """
        if s == 0.0:
            return cls(v, v, v)
        if v == 0.0:
            return cls(0.0, 0.0, 0.0)
        f = h * 6.0
        sector = math.floor(f)
        frac = f - sector
        low = v * (1.0 - s)
        falling = v * (1.0 - s * frac)
        rising = v * (1.0 - s * (1.0 - frac))
        sectors = {
            -1: (v, low, falling),
            0: (v, rising, low),
            1: (falling, v, low),
            2: (low, v, rising),
            3: (low, falling, v),
            4: (rising, low, v),
            5: (v, low, falling),
            6: (v, rising, low),
        }
        try:
            r, g, b = sectors[sector]
        except KeyError:
            raise ValueError(f"hue {h} is out of range") from None
        if not hdr:
            r, g, b = (min(1.0, max(0.0, c)) for c in (r, g, b))
        return cls(r, g, b)


_NAMED_PACKED = {
    "TransparentBlack": 0x00000000,
    "Transparent": 0x00000000,
    "AliceBlue": 0xFFFFF8F0,
    "AntiqueWhite": 0xFFD7EBFA,
    "Aqua": 0xFFFFFF00,
    "Aquamarine": 0xFFD4FF7F,
    "Azure": 0xFFFFFFF0,
    "Beige": 0xFFDCF5F5,
    "Bisque": 0xFFC4E4FF,
    "Black": 0xFF000000,
    "BlanchedAlmond": 0xFFCDEBFF,
    "Blue": 0xFFFF0000,
    "BlueViolet": 0xFFE22B8A,
    "Brown": 0xFF2A2AA5,
    "BurlyWood": 0xFF87B8DE,
    "CadetBlue": 0xFFA09E5F,
    "Chartreuse": 0xFF00FF7F,
    "Chocolate": 0xFF1E69D2,
    "Coral": 0xFF507FFF,
    "CornflowerBlue": 0xFFED9564,
    "Cornsilk": 0xFFDCF8FF,
    "Crimson": 0xFF3C14DC,
    "Cyan": 0xFFFFFF00,
    "DarkBlue": 0xFF8B0000,
    "DarkCyan": 0xFF8B8B00,
    "DarkGoldenrod": 0xFF0B86B8,
    "DarkGray": 0xFFA9A9A9,
    "DarkGreen": 0xFF006400,
    "DarkKhaki": 0xFF6BB7BD,
    "DarkMagenta": 0xFF8B008B,
    "DarkOliveGreen": 0xFF2F6B55,
    "DarkOrange": 0xFF008CFF,
    "DarkOrchid": 0xFFCC3299,
    "DarkRed": 0xFF00008B,
    "DarkSalmon": 0xFF7A96E9,
    "DarkSeaGreen": 0xFF8BBC8F,
    "DarkSlateBlue": 0xFF8B3D48,
    "DarkSlateGray": 0xFF4F4F2F,
    "DarkTurquoise": 0xFFD1CE00,
    "DarkViolet": 0xFFD30094,
    "DeepPink": 0xFF9314FF,
    "DeepSkyBlue": 0xFFFFBF00,
    "DimGray": 0xFF696969,
    "DodgerBlue": 0xFFFF901E,
    "Firebrick": 0xFF2222B2,
    "FloralWhite": 0xFFF0FAFF,
    "ForestGreen": 0xFF228B22,
    "Fuchsia": 0xFFFF00FF,
    "Gainsboro": 0xFFDCDCDC,
    "GhostWhite": 0xFFFFF8F8,
    "Gold": 0xFF00D7FF,
    "Goldenrod": 0xFF20A5DA,
    "Gray": 0xFF808080,
    "Green": 0xFF008000,
    "GreenYellow": 0xFF2FFFAD,
    "Honeydew": 0xFFF0FFF0,
    "HotPink": 0xFFB469FF,
    "IndianRed": 0xFF5C5CCD,
    "Indigo": 0xFF82004B,
    "Ivory": 0xFFF0FFFF,
    "Khaki": 0xFF8CE6F0,
    "Lavender": 0xFFFAE6E6,
    "LavenderBlush": 0xFFF5F0FF,
    "LawnGreen": 0xFF00FC7C,
    "LemonChiffon": 0xFFCDFAFF,
    "LightBlue": 0xFFE6D8AD,
    "LightCoral": 0xFF8080F0,
    "LightCyan": 0xFFFFFFE0,
    "LightGoldenrodYellow": 0xFFD2FAFA,
    "LightGray": 0xFFD3D3D3,
    "LightGreen": 0xFF90EE90,
    "LightPink": 0xFFC1B6FF,
    "LightSalmon": 0xFF7AA0FF,
    "LightSeaGreen": 0xFFAAB220,
    "LightSkyBlue": 0xFFFACE87,
    "LightSlateGray": 0xFF998877,
    "LightSteelBlue": 0xFFDEC4B0,
    "LightYellow": 0xFFE0FFFF,
    "Lime": 0xFF00FF00,
    "LimeGreen": 0xFF32CD32,
    "Linen": 0xFFE6F0FA,
    "Magenta": 0xFFFF00FF,
    "Maroon": 0xFF000080,
    "MediumAquamarine": 0xFFAACD66,
    "MediumBlue": 0xFFCD0000,
    "MediumOrchid": 0xFFD355BA,
    "MediumPurple": 0xFFDB7093,
    "MediumSeaGreen": 0xFF71B33C,
    "MediumSlateBlue": 0xFFEE687B,
    "MediumSpringGreen": 0xFF9AFA00,
    "MediumTurquoise": 0xFFCCD148,
    "MediumVioletRed": 0xFF8515C7,
    "MidnightBlue": 0xFF701919,
    "MintCream": 0xFFFAFFF5,
    "MistyRose": 0xFFE1E4FF,
    "Moccasin": 0xFFB5E4FF,
    "NavajoWhite": 0xFFADDEFF,
    "Navy": 0xFF800000,
    "OldLace": 0xFFE6F5FD,
    "Olive": 0xFF008080,
    "OliveDrab": 0xFF238E6B,
    "Orange": 0xFF00A5FF,
    "OrangeRed": 0xFF0045FF,
    "Orchid": 0xFFD670DA,
    "PaleGoldenrod": 0xFFAAE8EE,
    "PaleGreen": 0xFF98FB98,
    "PaleTurquoise": 0xFFEEEEAF,
    "PaleVioletRed": 0xFF9370DB,
    "PapayaWhip": 0xFFD5EFFF,
    "PeachPuff": 0xFFB9DAFF,
    "Peru": 0xFF3F85CD,
    "Pink": 0xFFCBC0FF,
    "Plum": 0xFFDDA0DD,
    "PowderBlue": 0xFFE6E0B0,
    "Purple": 0xFF800080,
    "Red": 0xFF0000FF,
    "RosyBrown": 0xFF8F8FBC,
    "RoyalBlue": 0xFFE16941,
    "SaddleBrown": 0xFF13458B,
    "Salmon": 0xFF7280FA,
    "SandyBrown": 0xFF60A4F4,
    "SeaGreen": 0xFF578B2E,
    "SeaShell": 0xFFEEF5FF,
    "Sienna": 0xFF2D52A0,
    "Silver": 0xFFC0C0C0,
    "SkyBlue": 0xFFEBCE87,
    "SlateBlue": 0xFFCD5A6A,
    "SlateGray": 0xFF908070,
    "Snow": 0xFFFAFAFF,
    "SpringGreen": 0xFF7FFF00,
    "SteelBlue": 0xFFB48246,
    "Tan": 0xFF8CB4D2,
    "Teal": 0xFF808000,
    "Thistle": 0xFFD8BFD8,
    "Tomato": 0xFF4763FF,
    "Turquoise": 0xFFD0E040,
    "Violet": 0xFFEE82EE,
    "Wheat": 0xFFB3DEF5,
    "White": 0xFFFFFFFF,
    "WhiteSmoke": 0xFFF5F5F5,
    "Yellow": 0xFF00FFFF,
    "YellowGreen": 0xFF32CD9A,
}


def _constant_name(camel: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", camel).upper()


for _name, _packed in _NAMED_PACKED.items():
    setattr(Color32, _constant_name(_name), Color32.from_packed(_packed))