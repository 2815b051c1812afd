"""Tile exploration engine: grid, movement, camera, dialog and rendering."""
