"""
Player entity
"""


class Player:
    """
    Player avatar on the maze grid
    Position only changes through validated moves
    """
    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y
        self.prev_x = x
        self.prev_y = y

        # Gameplay tracking
        self.moves = 0

    @property
    def pos(self):
        return (self.x, self.y)

    def target(self, dx, dy):
        """Cell the player would step into"""
        return self.x + dx, self.y + dy

    def move_to(self, x, y):
        """
        Move player to an already validated cell

        Args:
            x, y: Target grid position
        """
        self.prev_x, self.prev_y = self.x, self.y
        self.x = x
        self.y = y
        self.moves += 1

    def __repr__(self):
        return f"Player(pos=({self.x},{self.y}), moves={self.moves})"
