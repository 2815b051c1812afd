# ---- Display & timing ----
WINDOW_W = 960
WINDOW_H = 576
FPS = 60

# ---- World & tiles ----
TILE_SIZE = 48        # environment tiles
CHARACTER_SIZE = 32   # character sprites, drawn inside a tile
WORLD_W = 32
WORLD_H = 24
SEED = None  # None picks a fresh layout every launch; RESUME_QUEST_SEED overrides
TREE_CHANCE = 0.10
STONE_CHANCE = 0.05

# Cells forced to grass after generation, as (row, col). NPC cells are added at startup.
CLEARINGS = ((12, 8), (10, 15), (15, 10), (8, 20), (18, 25))

# ---- Player ----
PLAYER_SPAWN = (8, 12)
MOVE_DELAY = 0.2           # seconds between accepted grid steps
ANIM_FRAME_DURATION = 0.5  # seconds per walk-cycle frame
