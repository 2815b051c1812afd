"""Validation helpers for layered-rectangle template definitions."""

from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import yaml

class TemplateError(Exception): pass
Color = Union[List[int], Tuple[int,int,int], str]
TEMPLATE_TYPES = ("tile","sprite","overlay")
LAYER_OPS = ("fill","rect")
def _ensure_int_pair(v, key):
    if not (isinstance(v,(list,tuple)) and len(v)==2 and all(isinstance(i,int) for i in v)):
        raise TemplateError(f'"{key}" must be [int,int]')
    return v[0], v[1]
def _ensure_rect(v, where):
    if not (isinstance(v,(list,tuple)) and len(v)==4 and all(isinstance(i,int) for i in v)):
        raise TemplateError(f'{where} "rect" must be [x,y,w,h] ints')
    if v[2] <= 0 or v[3] <= 0: raise TemplateError(f'{where} "rect" needs positive width and height')
    return tuple(v)
def validate_template(tpl: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(tpl, dict): raise TemplateError("Template must be a dict.")
    if tpl.get("version") != 1: raise TemplateError('Template "version" must be 1.')
    if tpl.get("type") not in TEMPLATE_TYPES: raise TemplateError('Bad "type".')
    if "name" not in tpl or not isinstance(tpl["name"], str): raise TemplateError('Need "name".')
    w, h = _ensure_int_pair(tpl.get("size", None), "size")
    if w <= 0 or h <= 0: raise TemplateError('"size" must be positive.')
    layers = tpl.get("layers", [])
    if not isinstance(layers,list) or not layers: raise TemplateError('"layers" must be non-empty list.')
    for i, layer in enumerate(layers):
        where = f'{tpl["name"]} layer {i}'
        if not isinstance(layer, dict) or "op" not in layer: raise TemplateError(f'{where} needs "op".')
        if layer["op"] not in LAYER_OPS: raise TemplateError(f'{where} has unknown op {layer["op"]!r}.')
        if "color" not in layer: raise TemplateError(f'{where} needs "color".')
        if layer["op"] == "rect": layer["rect"] = _ensure_rect(layer.get("rect"), where)
    return tpl
def load_catalog(path) -> Dict[str, Dict[str, Any]]:
    """Load a YAML file of ``templates:`` and validate each entry."""

    path = Path(path)
    with open(path, "r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    entries = data.get("templates", [])
    if not isinstance(entries, list): raise TemplateError(f'{path.name}: "templates" must be a list.')
    catalog: Dict[str, Dict[str, Any]] = {}
    for entry in entries:
        tpl = validate_template(entry)
        if tpl["name"] in catalog: raise TemplateError(f'{path.name}: duplicate template {tpl["name"]!r}.')
        catalog[tpl["name"]] = tpl
    return catalog
