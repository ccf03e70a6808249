"""
SVG 1.0 color keywords: http://www.w3.org/TR/SVG/types.html#ColorKeywords

Each keyword is a module-level ``RgbU8`` constant; ``SVG_COLORS`` maps the
lowercase keyword to the same value.
"""
from types import MappingProxyType
from typing import Mapping

from .colors.rgb import RgbU8

ALICEBLUE             = RgbU8(0xF0, 0xF8, 0xFF)
ANTIQUEWHITE          = RgbU8(0xFA, 0xEB, 0xD7)
AQUA                  = RgbU8(0x00, 0xFF, 0xFF)
AQUAMARINE            = RgbU8(0x7F, 0xFF, 0xD4)
AZURE                 = RgbU8(0xF0, 0xFF, 0xFF)
BEIGE                 = RgbU8(0xF5, 0xF5, 0xDC)
BISQUE                = RgbU8(0xFF, 0xE4, 0xC4)
BLACK                 = RgbU8(0x00, 0x00, 0x00)
BLANCHEDALMOND        = RgbU8(0xFF, 0xEB, 0xCD)
BLUE                  = RgbU8(0x00, 0x00, 0xFF)
BLUEVIOLET            = RgbU8(0x8A, 0x2B, 0xE2)
BROWN                 = RgbU8(0xA5, 0x2A, 0x2A)
BURLYWOOD             = RgbU8(0xDE, 0xB8, 0x87)
CADETBLUE             = RgbU8(0x5F, 0x9E, 0xA0)
CHARTREUSE            = RgbU8(0x7F, 0xFF, 0x00)
CHOCOLATE             = RgbU8(0xD2, 0x69, 0x1E)
CORAL                 = RgbU8(0xFF, 0x7F, 0x50)
CORNFLOWERBLUE        = RgbU8(0x64, 0x95, 0xED)
CORNSILK              = RgbU8(0xFF, 0xF8, 0xDC)
CRIMSON               = RgbU8(0xDC, 0x14, 0x3C)
CYAN                  = RgbU8(0x00, 0xFF, 0xFF)
DARKBLUE              = RgbU8(0x00, 0x00, 0x8B)
DARKCYAN              = RgbU8(0x00, 0x8B, 0x8B)
DARKGOLDENROD         = RgbU8(0xB8, 0x86, 0x0B)
DARKGRAY              = RgbU8(0xA9, 0xA9, 0xA9)
DARKGREEN             = RgbU8(0x00, 0x64, 0x00)
DARKKHAKI             = RgbU8(0xBD, 0xB7, 0x6B)
DARKMAGENTA           = RgbU8(0x8B, 0x00, 0x8B)
DARKOLIVEGREEN        = RgbU8(0x55, 0x6B, 0x2F)
DARKORANGE            = RgbU8(0xFF, 0x8C, 0x00)
DARKORCHID            = RgbU8(0x99, 0x32, 0xCC)
DARKRED               = RgbU8(0x8B, 0x00, 0x00)
DARKSALMON            = RgbU8(0xE9, 0x96, 0x7A)
DARKSEAGREEN          = RgbU8(0x8F, 0xBC, 0x8F)
DARKSLATEBLUE         = RgbU8(0x48, 0x3D, 0x8B)
DARKSLATEGRAY         = RgbU8(0x2F, 0x4F, 0x4F)
DARKTURQUOISE         = RgbU8(0x00, 0xCE, 0xD1)
DARKVIOLET            = RgbU8(0x94, 0x00, 0xD3)
DEEPPINK              = RgbU8(0xFF, 0x14, 0x93)
DEEPSKYBLUE           = RgbU8(0x00, 0xBF, 0xFF)
DIMGRAY               = RgbU8(0x69, 0x69, 0x69)
DODGERBLUE            = RgbU8(0x1E, 0x90, 0xFF)
FIREBRICK             = RgbU8(0xB2, 0x22, 0x22)
FLORALWHITE           = RgbU8(0xFF, 0xFA, 0xF0)
FORESTGREEN           = RgbU8(0x22, 0x8B, 0x22)
FUCHSIA               = RgbU8(0xFF, 0x00, 0xFF)
GAINSBORO             = RgbU8(0xDC, 0xDC, 0xDC)
GHOSTWHITE            = RgbU8(0xF8, 0xF8, 0xFF)
GOLD                  = RgbU8(0xFF, 0xD7, 0x00)
GOLDENROD             = RgbU8(0xDA, 0xA5, 0x20)
GRAY                  = RgbU8(0x80, 0x80, 0x80)
GREEN                 = RgbU8(0x00, 0x80, 0x00)
GREENYELLOW           = RgbU8(0xAD, 0xFF, 0x2F)
HONEYDEW              = RgbU8(0xF0, 0xFF, 0xF0)
HOTPINK               = RgbU8(0xFF, 0x69, 0xB4)
INDIANRED             = RgbU8(0xCD, 0x5C, 0x5C)
INDIGO                = RgbU8(0x4B, 0x00, 0x82)
IVORY                 = RgbU8(0xFF, 0xFF, 0xF0)
KHAKI                 = RgbU8(0xF0, 0xE6, 0x8C)
LAVENDER              = RgbU8(0xE6, 0xE6, 0xFA)
LAVENDERBLUSH         = RgbU8(0xFF, 0xF0, 0xF5)
LAWNGREEN             = RgbU8(0x7C, 0xFC, 0x00)
LEMONCHIFFON          = RgbU8(0xFF, 0xFA, 0xCD)
LIGHTBLUE             = RgbU8(0xAD, 0xD8, 0xE6)
LIGHTCORAL            = RgbU8(0xF0, 0x80, 0x80)
LIGHTCYAN             = RgbU8(0xE0, 0xFF, 0xFF)
LIGHTGOLDENRODYELLOW  = RgbU8(0xFA, 0xFA, 0xD2)
LIGHTGREEN            = RgbU8(0x90, 0xEE, 0x90)
LIGHTGREY             = RgbU8(0xD3, 0xD3, 0xD3)
LIGHTPINK             = RgbU8(0xFF, 0xB6, 0xC1)
LIGHTSALMON           = RgbU8(0xFF, 0xA0, 0x7A)
LIGHTSEAGREEN         = RgbU8(0x20, 0xB2, 0xAA)
LIGHTSKYBLUE          = RgbU8(0x87, 0xCE, 0xFA)
LIGHTSLATEGRAY        = RgbU8(0x77, 0x88, 0x99)
LIGHTSTEELBLUE        = RgbU8(0xB0, 0xC4, 0xDE)
LIGHTYELLOW           = RgbU8(0xFF, 0xFF, 0xE0)
LIME                  = RgbU8(0x00, 0xFF, 0x00)
LIMEGREEN             = RgbU8(0x32, 0xCD, 0x32)
LINEN                 = RgbU8(0xFA, 0xF0, 0xE6)
MAGENTA               = RgbU8(0xFF, 0x00, 0xFF)
MAROON                = RgbU8(0x80, 0x00, 0x00)
MEDIUMAQUAMARINE      = RgbU8(0x66, 0xCD, 0xAA)
MEDIUMBLUE            = RgbU8(0x00, 0x00, 0xCD)
MEDIUMORCHID          = RgbU8(0xBA, 0x55, 0xD3)
MEDIUMPURPLE          = RgbU8(0x93, 0x70, 0xDB)
MEDIUMSEAGREEN        = RgbU8(0x3C, 0xB3, 0x71)
MEDIUMSLATEBLUE       = RgbU8(0x7B, 0x68, 0xEE)
MEDIUMSPRINGGREEN     = RgbU8(0x00, 0xFA, 0x9A)
MEDIUMTURQUOISE       = RgbU8(0x48, 0xD1, 0xCC)
MEDIUMVIOLETRED       = RgbU8(0xC7, 0x15, 0x85)
MIDNIGHTBLUE          = RgbU8(0x19, 0x19, 0x70)
MINTCREAM             = RgbU8(0xF5, 0xFF, 0xFA)
MISTYROSE             = RgbU8(0xFF, 0xE4, 0xE1)
MOCCASIN              = RgbU8(0xFF, 0xE4, 0xB5)
NAVAJOWHITE           = RgbU8(0xFF, 0xDE, 0xAD)
NAVY                  = RgbU8(0x00, 0x00, 0x80)
OLDLACE               = RgbU8(0xFD, 0xF5, 0xE6)
OLIVE                 = RgbU8(0x80, 0x80, 0x00)
OLIVEDRAB             = RgbU8(0x6B, 0x8E, 0x23)
ORANGE                = RgbU8(0xFF, 0xA5, 0x00)
ORANGERED             = RgbU8(0xFF, 0x45, 0x00)
ORCHID                = RgbU8(0xDA, 0x70, 0xD6)
PALEGOLDENROD         = RgbU8(0xEE, 0xE8, 0xAA)
PALEGREEN             = RgbU8(0x98, 0xFB, 0x98)
PALEVIOLETRED         = RgbU8(0xDB, 0x70, 0x93)
PAPAYAWHIP            = RgbU8(0xFF, 0xEF, 0xD5)
PEACHPUFF             = RgbU8(0xFF, 0xDA, 0xB9)
PERU                  = RgbU8(0xCD, 0x85, 0x3F)
PINK                  = RgbU8(0xFF, 0xC0, 0xCB)
PLUM                  = RgbU8(0xDD, 0xA0, 0xDD)
POWDERBLUE            = RgbU8(0xB0, 0xE0, 0xE6)
PURPLE                = RgbU8(0x80, 0x00, 0x80)
RED                   = RgbU8(0xFF, 0x00, 0x00)
ROSYBROWN             = RgbU8(0xBC, 0x8F, 0x8F)
ROYALBLUE             = RgbU8(0x41, 0x69, 0xE1)
SADDLEBROWN           = RgbU8(0x8B, 0x45, 0x13)
SALMON                = RgbU8(0xFA, 0x80, 0x72)
SANDYBROWN            = RgbU8(0xFA, 0xA4, 0x60)
SEAGREEN              = RgbU8(0x2E, 0x8B, 0x57)
SEASHELL              = RgbU8(0xFF, 0xF5, 0xEE)
SIENNA                = RgbU8(0xA0, 0x52, 0x2D)
SILVER                = RgbU8(0xC0, 0xC0, 0xC0)
SKYBLUE               = RgbU8(0x87, 0xCE, 0xEB)
SLATEBLUE             = RgbU8(0x6A, 0x5A, 0xCD)
SLATEGRAY             = RgbU8(0x70, 0x80, 0x90)
SNOW                  = RgbU8(0xFF, 0xFA, 0xFA)
SPRINGGREEN           = RgbU8(0x00, 0xFF, 0x7F)
STEELBLUE             = RgbU8(0x46, 0x82, 0xB4)
TAN                   = RgbU8(0xD2, 0xB4, 0x8C)
TEAL                  = RgbU8(0x00, 0x80, 0x80)
THISTLE               = RgbU8(0xD8, 0xBF, 0xD8)
TOMATO                = RgbU8(0xFF, 0x63, 0x47)
TURQUOISE             = RgbU8(0x40, 0xE0, 0xD0)
VIOLET                = RgbU8(0xEE, 0x82, 0xEE)
WHEAT                 = RgbU8(0xF5, 0xDE, 0xB3)
WHITE                 = RgbU8(0xFF, 0xFF, 0xFF)
WHITESMOKE            = RgbU8(0xF5, 0xF5, 0xF5)
YELLOW                = RgbU8(0xFF, 0xFF, 0x00)
YELLOWGREEN           = RgbU8(0x9A, 0xCD, 0x32)

SVG_COLORS: Mapping[str, RgbU8] = MappingProxyType({
    "aliceblue": ALICEBLUE,
    "antiquewhite": ANTIQUEWHITE,
    "aqua": AQUA,
    "aquamarine": AQUAMARINE,
    "azure": AZURE,
    "beige": BEIGE,
    "bisque": BISQUE,
    "black": BLACK,
    "blanchedalmond": BLANCHEDALMOND,
    "blue": BLUE,
    "blueviolet": BLUEVIOLET,
    "brown": BROWN,
    "burlywood": BURLYWOOD,
    "cadetblue": CADETBLUE,
    "chartreuse": CHARTREUSE,
    "chocolate": CHOCOLATE,
    "coral": CORAL,
    "cornflowerblue": CORNFLOWERBLUE,
    "cornsilk": CORNSILK,
    "crimson": CRIMSON,
    "cyan": CYAN,
    "darkblue": DARKBLUE,
    "darkcyan": DARKCYAN,
    "darkgoldenrod": DARKGOLDENROD,
    "darkgray": DARKGRAY,
    "darkgreen": DARKGREEN,
    "darkkhaki": DARKKHAKI,
    "darkmagenta": DARKMAGENTA,
    "darkolivegreen": DARKOLIVEGREEN,
    "darkorange": DARKORANGE,
    "darkorchid": DARKORCHID,
    "darkred": DARKRED,
    "darksalmon": DARKSALMON,
    "darkseagreen": DARKSEAGREEN,
    "darkslateblue": DARKSLATEBLUE,
    "darkslategray": DARKSLATEGRAY,
    "darkturquoise": DARKTURQUOISE,
    "darkviolet": DARKVIOLET,
    "deeppink": DEEPPINK,
    "deepskyblue": DEEPSKYBLUE,
    "dimgray": DIMGRAY,
    "dodgerblue": DODGERBLUE,
    "firebrick": FIREBRICK,
    "floralwhite": FLORALWHITE,
    "forestgreen": FORESTGREEN,
    "fuchsia": FUCHSIA,
    "gainsboro": GAINSBORO,
    "ghostwhite": GHOSTWHITE,
    "gold": GOLD,
    "goldenrod": GOLDENROD,
    "gray": GRAY,
    "green": GREEN,
    "greenyellow": GREENYELLOW,
    "honeydew": HONEYDEW,
    "hotpink": HOTPINK,
    "indianred": INDIANRED,
    "indigo": INDIGO,
    "ivory": IVORY,
    "khaki": KHAKI,
    "lavender": LAVENDER,
    "lavenderblush": LAVENDERBLUSH,
    "lawngreen": LAWNGREEN,
    "lemonchiffon": LEMONCHIFFON,
    "lightblue": LIGHTBLUE,
    "lightcoral": LIGHTCORAL,
    "lightcyan": LIGHTCYAN,
    "lightgoldenrodyellow": LIGHTGOLDENRODYELLOW,
    "lightgreen": LIGHTGREEN,
    "lightgrey": LIGHTGREY,
    "lightpink": LIGHTPINK,
    "lightsalmon": LIGHTSALMON,
    "lightseagreen": LIGHTSEAGREEN,
    "lightskyblue": LIGHTSKYBLUE,
    "lightslategray": LIGHTSLATEGRAY,
    "lightsteelblue": LIGHTSTEELBLUE,
    "lightyellow": LIGHTYELLOW,
    "lime": LIME,
    "limegreen": LIMEGREEN,
    "linen": LINEN,
    "magenta": MAGENTA,
    "maroon": MAROON,
    "mediumaquamarine": MEDIUMAQUAMARINE,
    "mediumblue": MEDIUMBLUE,
    "mediumorchid": MEDIUMORCHID,
    "mediumpurple": MEDIUMPURPLE,
    "mediumseagreen": MEDIUMSEAGREEN,
    "mediumslateblue": MEDIUMSLATEBLUE,
    "mediumspringgreen": MEDIUMSPRINGGREEN,
    "mediumturquoise": MEDIUMTURQUOISE,
    "mediumvioletred": MEDIUMVIOLETRED,
    "midnightblue": MIDNIGHTBLUE,
    "mintcream": MINTCREAM,
    "mistyrose": MISTYROSE,
    "moccasin": MOCCASIN,
    "navajowhite": NAVAJOWHITE,
    "navy": NAVY,
    "oldlace": OLDLACE,
    "olive": OLIVE,
    "olivedrab": OLIVEDRAB,
    "orange": ORANGE,
    "orangered": ORANGERED,
    "orchid": ORCHID,
    "palegoldenrod": PALEGOLDENROD,
    "palegreen": PALEGREEN,
    "palevioletred": PALEVIOLETRED,
    "papayawhip": PAPAYAWHIP,
    "peachpuff": PEACHPUFF,
    "peru": PERU,
    "pink": PINK,
    "plum": PLUM,
    "powderblue": POWDERBLUE,
    "purple": PURPLE,
    "red": RED,
    "rosybrown": ROSYBROWN,
    "royalblue": ROYALBLUE,
    "saddlebrown": SADDLEBROWN,
    "salmon": SALMON,
    "sandybrown": SANDYBROWN,
    "seagreen": SEAGREEN,
    "seashell": SEASHELL,
    "sienna": SIENNA,
    "silver": SILVER,
    "skyblue": SKYBLUE,
    "slateblue": SLATEBLUE,
    "slategray": SLATEGRAY,
    "snow": SNOW,
    "springgreen": SPRINGGREEN,
    "steelblue": STEELBLUE,
    "tan": TAN,
    "teal": TEAL,
    "thistle": THISTLE,
    "tomato": TOMATO,
    "turquoise": TURQUOISE,
    "violet": VIOLET,
    "wheat": WHEAT,
    "white": WHITE,
    "whitesmoke": WHITESMOKE,
    "yellow": YELLOW,
    "yellowgreen": YELLOWGREEN,
})
