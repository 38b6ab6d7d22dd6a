"""
Core maze functions - grid model, reachability and structure checks
"""

from collections import deque
from utils.constants import OPEN, WALL, DIRS


class MazeGrid:
    """
    Square maze grid with cell-based representation
    Each cell is either WALL or OPEN, indexed cells[y][x]
    """
    def __init__(self, size):
        self.size = size
        # Initialize all cells as walls
        self.cells = [[WALL for _ in range(size)] for _ in range(size)]

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.size and 0 <= y < self.size

    def is_open(self, x, y):
        """Check if an in-bounds cell is open"""
        return self.cells[y][x] == OPEN

    def is_wall(self, x, y):
        return self.cells[y][x] == WALL

    def open_cell(self, x, y):
        """Carve a single cell"""
        self.cells[y][x] = OPEN

    def open_neighbors(self, x, y):
        """Get list of open cells adjacent to (x, y)"""
        res = []
        for dx, dy in DIRS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny) and self.is_open(nx, ny):
                res.append((nx, ny))
        return res

    def open_cells(self):
        """All open cells in row-major order"""
        return [(x, y) for y in range(self.size) for x in range(self.size) if self.is_open(x, y)]

    def room_cells(self):
        """Even-indexed cells that can be maze nodes"""
        return [(x, y) for y in range(0, self.size, 2) for x in range(0, self.size, 2)]

    def rows_snapshot(self):
        """Immutable copy of the cell matrix"""
        return tuple(tuple(row) for row in self.cells)

    def __repr__(self):
        return f"MazeGrid(size={self.size}, open={len(self.open_cells())})"


def reachable_cells(grid, start=(0, 0)):
    """BFS over open cells, returns the set reachable from start"""
    if not grid.in_bounds(*start) or not grid.is_open(*start):
        return set()

    q = deque([start])
    seen = {start}

    while q:
        x, y = q.popleft()
        for n in grid.open_neighbors(x, y):
            if n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def count_connectors(grid):
    """Count open cells that are not rooms (odd x or odd y)"""
    return sum(1 for x, y in grid.open_cells() if x % 2 == 1 or y % 2 == 1)


def is_perfect(grid):
    """
    Check that open cells form a spanning tree over the rooms

    Every room is open and reachable from the origin, and there are
    exactly rooms - 1 connecting cells.
    """
    rooms = grid.room_cells()
    reached = reachable_cells(grid, (0, 0))

    if any(room not in reached for room in rooms):
        return False
    if len(reached) != len(grid.open_cells()):
        return False
    return count_connectors(grid) == len(rooms) - 1
