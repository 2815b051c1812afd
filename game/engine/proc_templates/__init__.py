from .spec import validate_template, load_catalog, TemplateError
from .engine import draw_layers, render_template_to_surface
from .palette import named_palette, hex_color, clamp, srgb
__all__ = ["validate_template","load_catalog","TemplateError","draw_layers","render_template_to_surface","named_palette","hex_color","clamp","srgb"]
