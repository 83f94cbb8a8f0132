#!/usr/bin/env python3
"""
Void Artillery FX - Demo Entry Point
====================================

Interactive sandbox for the particle presets and glitch events.

Usage:
    # Open the sandbox window
    python main.py

    # Simulate frames without a window and log particle counts
    python main.py --headless --frames 600

    # Reproducible effects with a capped particle pool
    python main.py --seed 42 --max-particles 400

Press:
    - Left click: Explosion
    - Right click: Sparks
    - Drag with left button: Trail
    - G: Force a glitch event
    - N: Next turn (30% glitch roll)
    - C: Clear particles
    - ESC or Q: Quit
"""

# Suppress pygame's pkg_resources deprecation warning (pygame issue #4557)
import warnings
warnings.filterwarnings("ignore", category=UserWarning, module="pygame.pkgdata")

import argparse
import os
import sys

import numpy as np
import pygame

from config import Config
from src.effects import ParticleSystem, Renderer, COLORS
from src.game import GameState, GlitchEventSystem, GLITCH_EVENTS
from src.utils.logger import LogLevel, get_logger, setup_logging


_logger = get_logger(__name__)


class EffectsApp:
    """
    Sandbox window driving one particle system and one glitch system.

    The app owns the session objects and hands the particle system to the
    glitch system, so every effect flows through a single instance.
    """

    def __init__(self, config: Config, headless: bool = False):
        self.config = config
        self.headless = headless
        self.rng = np.random.default_rng(config.SEED)

        self.particles = ParticleSystem(
            rng=self.rng, max_particles=config.MAX_PARTICLES, config=config
        )
        self.state = GameState.new_game()
        self.glitches = GlitchEventSystem(
            rng=self.rng, particles=self.particles, config=config
        )

        if headless:
            os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
        pygame.init()
        if headless:
            screen = pygame.Surface((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
        else:
            screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
            pygame.display.set_caption("Void Artillery FX")
        self.renderer = Renderer(screen)
        self.clock = pygame.time.Clock()
        self.running = True
        self.font = pygame.font.Font(None, 24)

    def handle_events(self) -> None:
        """Process window and input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False
                elif event.key == pygame.K_c:
                    self.particles.clear()
                elif event.key == pygame.K_g:
                    glitch = GLITCH_EVENTS[int(self.rng.integers(len(GLITCH_EVENTS)))]
                    self.glitches.apply_event(self.state, glitch)
                elif event.key == pygame.K_n:
                    self.state.advance_turn()
                    self.glitches.on_turn_start(self.state)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                if event.button == 1:
                    self.particles.explosion(x, y)
                elif event.button == 3:
                    self.particles.sparks(x, y)
            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                self.particles.trail(*event.pos)

    def draw(self) -> None:
        """Draw particles and the status line."""
        self.renderer.clear(self.config.COLOR_BACKGROUND)
        self.particles.draw(self.renderer)

        glitch = self.glitches.active_event
        status = (
            f"particles: {self.particles.count}   "
            f"gravity: {self.state.gravity:.2f}   "
            f"player: {self.state.player.name} ({self.state.player.tank_type})   "
            f"glitch: {glitch.name if glitch else '-'}"
        )
        text = self.font.render(status, True, COLORS['white'])
        self.renderer.surface.blit(text, (10, 10))
        pygame.display.flip()

    def run(self) -> None:
        """Main interactive loop."""
        _logger.info("Sandbox started")
        while self.running:
            dt = self.clock.tick(self.config.FPS) / 1000.0
            self.handle_events()
            self.particles.update(dt)
            self.draw()
        pygame.quit()

    def run_headless(self, frames: int, report_every: int = 60) -> int:
        """
        Simulate frames with random explosions and no window.

        Args:
            frames: Number of frames to simulate
            report_every: Log particle count every N frames

        Returns:
            Peak live particle count
        """
        dt = 1.0 / self.config.FPS
        width, height = self.config.SCREEN_WIDTH, self.config.SCREEN_HEIGHT
        peak = 0

        for frame in range(1, frames + 1):
            if frame % self.config.FPS == 1:
                x = float(self.rng.uniform(0, width))
                y = float(self.rng.uniform(0, height))
                self.particles.explosion(x, y)
                self.particles.sparks(x, y)
            self.particles.trail(width / 2, height / 2)

            self.particles.update(dt)
            self.particles.draw(self.renderer)
            peak = max(peak, self.particles.count)

            if frame % (self.config.FPS * 5) == 0:
                self.state.advance_turn()
                self.glitches.on_turn_start(self.state)
            if frame % report_every == 0:
                _logger.info(f"frame={frame} | particles={self.particles.count} | gravity={self.state.gravity:.2f}")

        _logger.info(f"Headless run finished: {frames} frames, peak particles={peak}")
        pygame.quit()
        return peak


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Void Artillery FX - particle and glitch event sandbox",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--headless', action='store_true',
        help='Simulate without a window'
    )
    parser.add_argument(
        '--frames', type=int, default=600,
        help='Frames to simulate in headless mode (default: 600)'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Seed for the effect random generator'
    )
    parser.add_argument(
        '--max-particles', type=int, default=None,
        help='Cap on live particles (default: unbounded)'
    )
    parser.add_argument(
        '--fps', type=int, default=None,
        help='Frame rate (default: from config)'
    )
    parser.add_argument(
        '--log-level', type=str, default=None,
        choices=[level.name for level in LogLevel],
        help='Logging verbosity (default: from config)'
    )
    parser.add_argument(
        '--log-file', action='store_true',
        help='Also write logs to the log directory'
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Apply command line overrides on top of the defaults."""
    config = Config()
    if args.seed is not None:
        config.SEED = args.seed
    if args.max_particles is not None:
        config.MAX_PARTICLES = args.max_particles
    if args.fps is not None:
        config.FPS = args.fps
    if args.log_level is not None:
        config.LOG_LEVEL = args.log_level
    if args.log_file:
        config.LOG_TO_FILE = True
    config.__post_init__()
    return config


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    config = build_config(args)

    setup_logging(
        log_dir=config.LOG_DIR,
        level=LogLevel[config.LOG_LEVEL],
        file_output=config.LOG_TO_FILE,
        force=True,
    )

    app = EffectsApp(config, headless=args.headless)
    if args.headless:
        app.run_headless(args.frames)
    else:
        app.run()


if __name__ == "__main__":
    sys.exit(main())
