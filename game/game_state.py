"""
Game State Machine - Playing and Won
"""

from enum import Enum, auto
from utils.errors import InvalidTransitionError


class GameState(Enum):
    """Game states"""
    PLAYING = auto()
    WON = auto()


# The only legal transitions
TRANSITIONS = {
    GameState.PLAYING: {GameState.WON},
    GameState.WON: {GameState.PLAYING},
}


class GameStateManager:
    """
    Manages game state transitions
    The game can't be lost, only won and restarted
    """
    def __init__(self):
        self.current_state = GameState.PLAYING
        self.previous_state = None

    def transition_to(self, new_state):
        """
        Transition to a new state

        Args:
            new_state: GameState enum value

        Raises:
            InvalidTransitionError for anything outside TRANSITIONS
        """
        if new_state not in TRANSITIONS[self.current_state]:
            raise InvalidTransitionError(
                f"Can't go from {self.current_state.name} to {new_state.name}"
            )
        self.previous_state = self.current_state
        self.current_state = new_state

    def win(self):
        self.transition_to(GameState.WON)

    def restart(self):
        """Back to PLAYING; a no-op when already playing"""
        if self.current_state != GameState.PLAYING:
            self.transition_to(GameState.PLAYING)

    def is_state(self, state):
        """Check if current state matches"""
        return self.current_state == state

    @property
    def won(self):
        return self.current_state == GameState.WON

    def get_state_name(self):
        """Get current state name"""
        return self.current_state.name

    def __repr__(self):
        return f"GameStateManager(state={self.current_state.name})"
