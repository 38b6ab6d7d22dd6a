"""
Neon Maze
Collect every fruit while dodging the moving walls
"""

import argparse
import pygame

from game.simulation import GameSimulation, MoveOutcome
from game.settings import GameConfig
from game.input_handler import InputHandler
from game.renderer import Renderer
from utils.constants import FPS, MAZE_SIZE
from config import GAME_TITLE, GAME_VERSION


class MazeGame:
    """
    Main game class - 60 FPS loop around a GameSimulation
    """
    def __init__(self, config):
        pygame.init()

        self.simulation = GameSimulation(config)
        self.input_handler = InputHandler(self.simulation)
        self.renderer = Renderer(config.size)

        self.screen = pygame.display.set_mode((self.renderer.screen_w, self.renderer.screen_h))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        self.clock = pygame.time.Clock()

    def run(self):
        """Main loop"""
        cfg = self.simulation.config
        print(f"Starting {GAME_TITLE}: maze {cfg.size}x{cfg.size}, seed {cfg.seed}")

        while not self.input_handler.quit_requested:
            self.clock.tick(FPS)

            for _, outcome in self.input_handler.process_events(pygame.event.get()):
                if outcome == MoveOutcome.MOVED_AND_WON:
                    print("YOU WIN!")

            if self.simulation.running:
                self.simulation.tick()
            elif self.simulation.won:
                # Let the celebration bursts play out
                self.simulation.update_effects()

            self.renderer.draw(self.screen, self.simulation.snapshot())
            pygame.display.flip()

        pygame.quit()
        print("Game closed.")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=f"{GAME_TITLE} v{GAME_VERSION}")
    parser.add_argument("--size", type=int, default=MAZE_SIZE, help="maze side length (odd, >= 3)")
    parser.add_argument("--seed", type=int, default=None, help="random seed for a reproducible maze")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    game = MazeGame(GameConfig(size=args.size, seed=args.seed))
    game.run()


if __name__ == "__main__":
    main()
