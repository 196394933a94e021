"""
One play session: the state, the entities and the per-frame tick.

A tick runs, in order: background, bubbles (spawn, update, collide, prune),
particles, player, readout, notifications, frame counter. Nothing runs
while paused.
"""

import logging
import random
from typing import List, Optional

from letterquest import config
from letterquest.entities import Bubble, Particle, ParticleKind, Player
from letterquest.hud import NotificationBoard, Readout
from letterquest.pointer import PointerInput
from letterquest.state import GameState
from letterquest.surface import NULL_SURFACE, Surface
from letterquest.words import check_for_words

logger = logging.getLogger(__name__)


class GameSession:
    """Owns everything that changes from frame to frame"""

    def __init__(self, width: float, height: float,
                 notifications: Optional[NotificationBoard] = None,
                 audio=None,
                 readout: Optional[Readout] = None,
                 muted: bool = config.START_MUTED):
        self.width = width
        self.height = height
        self.notifications = notifications if notifications is not None else NotificationBoard()
        self.audio = audio  # SoundBoard-like; None plays nothing
        self.readout = readout if readout is not None else Readout()
        self.state = GameState(width, height, self.notifications, muted)
        self.player = Player(width / 2, height / 2)
        self.pointer = PointerInput(width / 2, height / 2)
        self.bubbles: List[Bubble] = []
        self.particles: List[Particle] = []

    def tick(self, surface: Surface = NULL_SURFACE) -> bool:
        """Advance one frame. Returns False when paused and nothing ran."""
        if self.state.is_paused:
            return False

        self.draw_background(surface)
        self.handle_bubbles(surface)
        self.handle_particles(surface)

        self.player.update(self.state, self.pointer)
        self.player.render(surface)

        self.readout.update(self.state.score, self.state.letters_collected,
                            self.state.level, self.state.collected_word)
        self.notifications.tick(self.state.game_frame)
        self.state.game_frame += 1
        return True

    def draw_background(self, surface: Surface):
        surface.fill_background(self.state.game_frame)
        for mote in self.state.background_motes:
            mote.drift(self.width, self.height)
            surface.disc(mote.x, mote.y, mote.size, mote.color, mote.opacity)
        self.pointer.render(surface)

    def spawn_bubble(self) -> Bubble:
        bubble = Bubble(self.width, self.height)
        self.bubbles.append(bubble)
        return bubble

    def handle_bubbles(self, surface: Surface = NULL_SURFACE):
        """Spawn on cadence, then update, collide and prune every bubble"""
        if self.state.game_frame % self.state.bubble_spawn_rate == 0:
            self.spawn_bubble()

        # Newest first, over a snapshot; survivors replace the list at the end
        survivors = []
        for bubble in reversed(self.bubbles):
            bubble.update(self.state)
            bubble.render(surface)

            if bubble.is_gone():
                continue

            if bubble.collides_with(self.player):
                self.collect(bubble)
                continue

            survivors.append(bubble)

        survivors.reverse()
        self.bubbles = survivors

    def collect(self, bubble: Bubble):
        """Score a bubble the fish swam into"""
        self.burst(bubble.x, bubble.y, bubble.color)
        if not self.state.is_muted:
            self._play_pop()

        self.state.score += config.POINTS_PER_LETTER * self.state.level
        self.state.letters_collected += 1
        self.state.collected_word += bubble.letter

        word = check_for_words(self.state)
        if word is not None:
            self.fizz(bubble.x, bubble.y)
            if not self.state.is_muted:
                self._play('word_bonus')

        if self.state.update_level() and not self.state.is_muted:
            self._play('level_up')

    def burst(self, x: float, y: float, color: str):
        for _ in range(config.BURST_PARTICLES):
            kind = ParticleKind.STAR if random.random() < config.STAR_PARTICLE_CHANCE else ParticleKind.NORMAL
            self.particles.append(Particle(x, y, color, kind))

    def fizz(self, x: float, y: float):
        """Rising bubbles celebrating a spelled word"""
        for _ in range(config.BURST_PARTICLES):
            self.particles.append(Particle(x, y, '#ffffff', ParticleKind.BUBBLE))

    def handle_particles(self, surface: Surface = NULL_SURFACE):
        survivors = []
        for particle in self.particles:
            particle.update()
            particle.render(surface)
            if not particle.is_dead():
                survivors.append(particle)
        self.particles = survivors

    def _play_pop(self):
        if self.audio is not None:
            self.audio.play_pop()

    def _play(self, name: str):
        if self.audio is not None:
            self.audio.play(name)

    # --- Control signals ---

    def toggle_pause(self) -> bool:
        self.state.is_paused = not self.state.is_paused
        logger.debug("Paused" if self.state.is_paused else "Resumed")
        return self.state.is_paused

    def resume(self):
        self.state.is_paused = False

    def toggle_mute(self) -> bool:
        self.state.is_muted = not self.state.is_muted
        return self.state.is_muted

    def reset(self):
        """Start over: fresh state, no bubbles or particles, fish at center"""
        logger.info("Reset at score %d, level %d", self.state.score, self.state.level)
        self.state.reset()
        self.bubbles = []
        self.particles = []
        self.player.place(self.width / 2, self.height / 2)
        self.notifications.clear()
        self.readout.update(self.state.score, self.state.letters_collected,
                            self.state.level, self.state.collected_word)

    def share_text(self) -> str:
        text = config.SHARE_TEMPLATE.format(score=self.state.score)
        logger.info("Share: %s", text)
        self.notifications.message(text)
        return text

    def resize(self, width: float, height: float):
        """Follow the terminal when it changes size"""
        self.width = width
        self.height = height
        self.state.width = width
        self.state.height = height
