
import pygame
from tetris_config import CONFIG

class Overlay:
    """Settings page: tweak CONFIG live, show session statistics, reset them."""
    def __init__(self, stats=None):
        self.active=False
        self.stats=stats
        self.items=[
            ("DAS_MS","DAS",0,400,10),
            ("ARR_MS","ARR",0,200,5),
            ("SOFT_DROP_MS","Soft drop",10,200,5),
            ("LINE_CLEAR_DELAY_MS","Clear flash",0,1500,50),
            ("PERFECT_CLEAR_BONUS","Perfect bonus",0,5000,100),
            ("NES_FIRST_PIECE_AVOID_SZO","No SZO first",False,True,None),
        ]
        self.index=0

    def toggle(self): self.active=not self.active

    def handle(self,e):
        if e.key in (pygame.K_ESCAPE,pygame.K_F1): self.toggle(); return
        if e.key==pygame.K_UP: self.index=(self.index-1)%len(self.items); return
        if e.key==pygame.K_DOWN: self.index=(self.index+1)%len(self.items); return
        if e.key==pygame.K_BACKSPACE and self.stats is not None: self.stats.reset(); return
        key,label,lo,hi,step=self.items[self.index]
        val=CONFIG[key]
        if isinstance(lo,bool):
            if e.key in (pygame.K_RETURN,pygame.K_LEFT,pygame.K_RIGHT): CONFIG[key]=not CONFIG[key]
        else:
            if e.key==pygame.K_LEFT: CONFIG[key]=max(lo,val-step)
            if e.key==pygame.K_RIGHT: CONFIG[key]=min(hi,val+step)

    def draw(self,screen,font,w,h):
        if not self.active: return
        s=pygame.Surface((w-80,h-80),pygame.SRCALPHA); s.fill((20,25,40,230))
        screen.blit(s,(40,40))
        screen.blit(font.render("SETTINGS (F1/Esc to close)",True,(230,240,255)),(60,56))
        y=100
        for i,(key,label,lo,hi,step) in enumerate(self.items):
            col=(255,255,255) if i==self.index else (200,210,235)
            screen.blit(font.render(f"{label}: {CONFIG[key]}",True,col),(60,y)); y+=30
        if self.stats is None: return
        y+=20
        for k,v in self.stats.as_dict().items():
            if k=="play_time_ms": v=self.stats.play_time_text()
            screen.blit(font.render(f"{k.replace('_',' ')}: {v}",True,(165,175,215)),(60,y)); y+=24
        screen.blit(font.render("Backspace: reset statistics",True,(165,175,215)),(60,y+10))
