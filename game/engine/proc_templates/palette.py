from typing import Tuple, Union
Color = Union[Tuple[int,int,int], Tuple[int,int,int,int]]
NAMED = {
    "WHITE": (255,255,255), "BLACK": (0,0,0), "SHADOW": (0,0,0,77),
    "GRASS_DARK": (42,90,26), "GRASS": (58,107,42), "GRASS_LIGHT": (74,124,58), "GRASS_BLADE": (90,140,74),
    "WATER_DEEP": (10,58,122), "WATER": (42,90,154), "STONE": (74,74,74), "BARK": (91,58,26),
    "LEAF": (26,107,26), "CAT": (255,107,53), "CAT_LIGHT": (255,139,85), "SKIN": (253,188,180),
    "INDICATOR": (255,255,0),
}
def named_palette(name: str) -> Color:
    up = name.upper()
    if up not in NAMED: raise KeyError(f"Unknown named color: {name}")
    return NAMED[up]
def clamp(x,a=0,b=255): return a if x<a else b if x>b else x
def hex_color(text: str) -> Color:
    digits = text[1:]
    if len(digits) not in (6, 8): raise ValueError(f"Bad hex color: {text}")
    return tuple(int(digits[i:i+2],16) for i in range(0,len(digits),2))  # type: ignore[return-value]
def srgb(r,g,b,a=255):
    return (clamp(int(r)),clamp(int(g)),clamp(int(b))) if a>=255 else (clamp(int(r)),clamp(int(g)),clamp(int(b)),clamp(int(a)))
