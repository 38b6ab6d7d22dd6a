"""
Input handling - maps pygame events to game intents
"""

import pygame
from game.simulation import Intent


KEY_BINDINGS = {
    pygame.K_UP: Intent.UP,
    pygame.K_w: Intent.UP,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_d: Intent.RIGHT,
    pygame.K_DOWN: Intent.DOWN,
    pygame.K_s: Intent.DOWN,
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_a: Intent.LEFT,
    pygame.K_r: Intent.RESTART,
    pygame.K_ESCAPE: Intent.STOP,
}


def event_to_intent(event):
    """
    Translate one pygame event

    Returns:
        Intent or None if the event means nothing to the game
    """
    if event.type == pygame.QUIT:
        return Intent.STOP
    if event.type == pygame.KEYDOWN:
        return KEY_BINDINGS.get(event.key)
    return None


class InputHandler:
    """
    Feeds intents from the pygame event queue into a simulation
    """
    def __init__(self, simulation):
        self.simulation = simulation
        self.quit_requested = False

    def handle_event(self, event):
        """
        Apply a single event

        Returns:
            (intent, outcome) - outcome is a MoveOutcome for moves, else None
        """
        intent = event_to_intent(event)
        if intent is None:
            return None, None

        # ESC only freezes the game, closing the window ends it
        if event.type == pygame.QUIT:
            self.quit_requested = True

        outcome = self.simulation.handle_intent(intent)
        return intent, outcome

    def process_events(self, events):
        """Apply a batch of events, returning the (intent, outcome) pairs"""
        results = []
        for event in events:
            intent, outcome = self.handle_event(event)
            if intent is not None:
                results.append((intent, outcome))
        return results
