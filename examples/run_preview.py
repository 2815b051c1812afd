import sys, os, pygame as pg
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "game"))
from engine.proc_templates import load_catalog, render_template_to_surface
def main():
    if len(sys.argv)<3: print("Usage: python examples/run_preview.py game/content/templates/tiles.yaml grass [scale]"); raise SystemExit(1)
    catalog=load_catalog(sys.argv[1]); name=sys.argv[2]; scale=float(sys.argv[3]) if len(sys.argv)>3 else 6.0
    if name not in catalog: print(f"Unknown template {name!r}; available: {', '.join(sorted(catalog))}"); raise SystemExit(1)
    pg.init(); surf=render_template_to_surface(catalog[name], scale); w,h=surf.get_size(); screen=pg.display.set_mode((max(256,w+32),max(256,h+32))); clock=pg.time.Clock(); run=True
    while run:
        for e in pg.event.get():
            if e.type==pg.QUIT or (e.type==pg.KEYDOWN and e.key==pg.K_ESCAPE): run=False
        screen.fill((32,32,40)); rect=surf.get_rect(center=(screen.get_width()//2, screen.get_height()//2)); screen.blit(surf,rect); pg.display.set_caption(name); pg.display.flip(); clock.tick(60)
    pg.quit()
if __name__=="__main__": main()
