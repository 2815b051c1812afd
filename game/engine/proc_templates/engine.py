import pygame as pg
from typing import Dict, Any, Tuple
from .spec import validate_template, TemplateError
from .palette import named_palette, hex_color, srgb
def _resolve_color(c):
    if isinstance(c,(list,tuple)) and len(c) in (3,4): return srgb(*c)
    if isinstance(c,str):
        try: return hex_color(c) if c.startswith("#") else named_palette(c)
        except (KeyError, ValueError) as exc: raise TemplateError(f"Unknown color spec: {c}") from exc
    raise TemplateError(f"Unknown color spec: {c}")
def _scaled(rect, origin, scale):
    x,y,w,h = rect; ox,oy = origin
    if scale == 1.0: return pg.Rect(ox+x, oy+y, w, h)
    return pg.Rect(ox+round(x*scale), oy+round(y*scale), max(1,round(w*scale)), max(1,round(h*scale)))
def _fill(surface, color, rect):
    if len(color)==4 and color[3]<255:
        if color[3]<=0: return
        temp=pg.Surface(rect.size, pg.SRCALPHA); temp.fill(color); surface.blit(temp, rect.topleft)
    else: surface.fill(color[:3], rect)
def draw_layers(surface: pg.Surface, tpl: Dict[str,Any], origin: Tuple[int,int]=(0,0), scale: float=1.0) -> None:
    """Paint every layer of ``tpl`` onto ``surface`` with its top-left at ``origin``."""

    W,H=tpl["size"]
    for layer in tpl["layers"]:
        color=_resolve_color(layer["color"])
        rect=(0,0,W,H) if layer["op"]=="fill" else layer["rect"]
        _fill(surface, color, _scaled(rect, origin, scale))
def render_template_to_surface(tpl: Dict[str,Any], scale: float=1.0) -> pg.Surface:
    tpl=validate_template(tpl); W,H=tpl["size"]
    surf=pg.Surface((max(1,round(W*scale)),max(1,round(H*scale))), pg.SRCALPHA)
    draw_layers(surf, tpl, (0,0), scale)
    return surf
