"""
flappy_client.py

pygame front end: window, input dispatch and rendering for a GameSession.
"""

import logging

import pygame

from .constants import BIRD_HEIGHT, BIRD_WIDTH, PIPE_WIDTH, RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .data_models import GameState, Playfield, Snapshot
from .highscore_db import HighScoreDB
from .physics_core import PhysicsCore
from .session import GameSession

logger = logging.getLogger(__name__)

SKY = (113, 197, 207)
PIPE_COLOR = (0, 150, 0)
PIPE_EDGE = (0, 90, 0)
BIRD_COLOR = (255, 255, 0)
BIRD_EDGE = (255, 165, 0)
WHITE = (255, 255, 255)
SHADE = (0, 0, 0, 150)

# ----------------- Renderer -----------------

class PygameRenderer:
    """Draws session snapshots onto the display surface."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.large_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 32)
        self.bird_sprite = self._make_bird_sprite()

    @staticmethod
    def _make_bird_sprite() -> pygame.Surface:
        sprite = pygame.Surface((BIRD_WIDTH, BIRD_HEIGHT), pygame.SRCALPHA)
        body = sprite.get_rect()
        pygame.draw.rect(sprite, BIRD_COLOR, body, border_radius=8)
        pygame.draw.rect(sprite, BIRD_EDGE, body, width=2, border_radius=8)
        pygame.draw.circle(sprite, (0, 0, 0), (28, 9), 3)
        pygame.draw.polygon(sprite, BIRD_EDGE, [(BIRD_WIDTH - 4, 12), (BIRD_WIDTH, 15), (BIRD_WIDTH - 4, 18)])
        pygame.draw.ellipse(sprite, BIRD_EDGE, (8, 14, 14, 8))
        return sprite

    def render(self, snapshot: Snapshot):
        screen = self.screen
        width, height = screen.get_size()
        screen.fill(SKY)

        for pipe in snapshot.pipes:
            self._draw_pipe(pipe.x, 0, pipe.top_height)
            self._draw_pipe(pipe.x, height - pipe.bottom_height, pipe.bottom_height)

        bird = snapshot.bird
        # pygame rotates counter-clockwise, the tilt is clockwise-positive
        rotated = pygame.transform.rotate(self.bird_sprite, -PhysicsCore.tilt(bird.velocity))
        center = (bird.x + BIRD_WIDTH / 2, bird.y + BIRD_HEIGHT / 2)
        screen.blit(rotated, rotated.get_rect(center=center))

        self._draw_scoreboard(snapshot.score, snapshot.high_score)

        if snapshot.state is GameState.IDLE:
            self._draw_overlay(width, height, [
                (self.large_font, "Flappy Bird"),
                (self.font, "Click or press Space to start"),
            ])
        elif snapshot.state is GameState.OVER:
            self._draw_overlay(width, height, [
                (self.large_font, "Game Over!"),
                (self.font, f"Score: {snapshot.score}"),
                (self.font, f"Best: {snapshot.high_score}"),
                (self.font, "Click or press R to play again"),
            ])

    def _draw_pipe(self, x: float, y: float, h: float):
        if h <= 0:
            return
        rect = pygame.Rect(int(x), int(y), PIPE_WIDTH, int(h))
        pygame.draw.rect(self.screen, PIPE_COLOR, rect)
        pygame.draw.rect(self.screen, PIPE_EDGE, rect, width=3)

    def _draw_scoreboard(self, score: int, high_score: int):
        score_text = self.large_font.render(f"{score}", True, WHITE)
        self.screen.blit(score_text, (20, 16))
        best_text = self.font.render(f"Best: {high_score}", True, WHITE)
        self.screen.blit(best_text, (20, 16 + score_text.get_height()))

    def _draw_overlay(self, width: int, height: int, lines):
        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill(SHADE)
        self.screen.blit(shade, (0, 0))

        total = sum(font.get_height() + 12 for font, _ in lines)
        y = height // 2 - total // 2
        for font, text in lines:
            surf = font.render(text, True, WHITE)
            self.screen.blit(surf, (width // 2 - surf.get_width() // 2, y))
            y += surf.get_height() + 12


# ----------------- Game Client (window / input / tick) -----------------

class FlappyClient:
    def __init__(self, db_file: str):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy Bird")
        self.playfield = Playfield(*self.screen.get_size())

        self.db = HighScoreDB(db_file)
        self.renderer = PygameRenderer(self.screen)
        self.session = GameSession(self.playfield, self.db, presentation=self.renderer)

        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop: one simulation tick per frame."""
        running = True
        while running:
            self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self._handle_resize(event.w, event.h)
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    self.session.jump(self.playfield)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self._handle_click()
                elif event.type == pygame.KEYDOWN and event.key in (pygame.K_r, pygame.K_RETURN):
                    self.session.reset(self.playfield)

            self.session.tick(self.playfield)
            pygame.display.flip()

        self.db.close()
        pygame.quit()

    def _handle_click(self):
        if self.session.state is GameState.OVER:
            self.session.reset(self.playfield)
        else:
            self.session.jump(self.playfield)

    def _handle_resize(self, width: int, height: int):
        # pygame 2 resizes the display surface itself; older versions need set_mode
        if self.screen.get_size() != (width, height):
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
            self.renderer.screen = self.screen
        self.playfield = Playfield(width, height)
        logger.debug("Playfield resized to %dx%d", width, height)
        self.session.render()
