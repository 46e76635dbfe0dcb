
import pygame
from tetris_game import Phase

class Overlay:
    """Translucent banner over the board for the paused and game-over phases."""
    def __init__(self, big_font, font):
        self.big_font=big_font; self.font=font

    def lines_for(self, phase, score):
        if phase is Phase.PAUSED: return ["PAUSED", "P to resume"]
        if phase is Phase.OVER: return ["GAME OVER", f"Final Score: {score}", "Enter / Esc to close"]
        return []

    def draw(self,screen,rect,phase,score):
        lines=self.lines_for(phase,score)
        if not lines: return
        s=pygame.Surface(rect.size,pygame.SRCALPHA); s.fill((20,25,40,200))
        screen.blit(s,rect.topleft)
        y=rect.centery-40
        for i,txt in enumerate(lines):
            f=self.big_font if i==0 else self.font
            surf=f.render(txt,True,(255,220,220) if i==0 else (200,210,235))
            screen.blit(surf,surf.get_rect(center=(rect.centerx,y))); y+=40 if i==0 else 26
