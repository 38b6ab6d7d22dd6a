"""
Collectible fruits
Picking up every fruit wins the game
"""


class Collectible:
    """
    A fruit sitting on an open cell
    """
    def __init__(self, x, y):
        self.x = x
        self.y = y

    @property
    def pos(self):
        return (self.x, self.y)

    def __repr__(self):
        return f"Collectible(pos=({self.x},{self.y}))"


class CollectibleManager:
    """
    Manages the fruits of the current maze
    """
    def __init__(self):
        self.items = []
        self.total = 0

    def add_collectible(self, x, y):
        """Add a fruit at (x, y)"""
        item = Collectible(x, y)
        self.items.append(item)
        self.total += 1
        return item

    def collect_at(self, x, y):
        """
        Remove every fruit on (x, y)

        Placement can stack several fruits on one cell, so all of them
        are picked up together.

        Returns:
            List of removed Collectible objects
        """
        taken = [item for item in self.items if item.x == x and item.y == y]
        if taken:
            self.items = [item for item in self.items if not (item.x == x and item.y == y)]
        return taken

    def positions(self):
        return tuple(item.pos for item in self.items)

    def __len__(self):
        return len(self.items)

    def __repr__(self):
        return f"CollectibleManager(remaining={len(self.items)}/{self.total})"
