"""Graph problems: word chains, topological order, sign mazes, pipe grids and bandwidth."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

HEADINGS = "NESW"
TURNS = "FLR"

_STEP = {"N": (-1, 0), "E": (0, 1), "S": (1, 0), "W": (0, -1)}

_PIPES = {
    "A": "UL",
    "B": "UR",
    "C": "DL",
    "D": "DR",
    "E": "UD",
    "F": "LR",
    "G": "ULR",
    "H": "UDL",
    "I": "DLR",
    "J": "UDR",
    "K": "UDLR",
}
_PIPE_MOVES = {"U": (-1, 0, "D"), "D": (1, 0, "U"), "L": (0, -1, "R"), "R": (0, 1, "L")}


def can_open_door(words: Iterable[str]) -> bool:
    """Return True if the words can be chained, each starting with the previous word's last letter."""
    words = list(words)
    if not words:
        raise ValueError("at least one word is required")
    if not all(words):
        raise ValueError("words must not be empty")

    indegree: Counter = Counter()
    outdegree: Counter = Counter()
    linked: dict[str, set[str]] = defaultdict(set)
    for word in words:
        first, last = word[0], word[-1]
        outdegree[first] += 1
        indegree[last] += 1
        linked[first].add(last)
        linked[last].add(first)

    extra_in = extra_out = 0
    for letter in linked:
        difference = indegree[letter] - outdegree[letter]
        if difference == 1:
            extra_in += 1
        elif difference == -1:
            extra_out += 1
        elif difference:
            return False
    if extra_in > 1 or extra_out > 1:
        return False

    origin = words[-1][-1]
    seen = {origin}
    pending = [origin]
    while pending:
        letter = pending.pop()
        for other in linked[letter] - seen:
            seen.add(other)
            pending.append(other)
    return len(seen) == len(linked)


def topological_order(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order vertices 1..n so that every edge (u, v) has u before v."""
    successors: dict[int, set[int]] = {vertex: set() for vertex in range(1, n + 1)}
    for u, v in edges:
        if u not in successors or v not in successors:
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 1..{n}")
        successors[u].add(v)

    finished: list[int] = []
    done: set[int] = set()
    active: set[int] = set()
    for root in range(1, n + 1):
        if root in done:
            continue
        active.add(root)
        stack = [(root, iter(sorted(successors[root])))]
        while stack:
            vertex, pending = stack[-1]
            for following in pending:
                if following in active:
                    raise ValueError("the graph has a cycle")
                if following not in done:
                    active.add(following)
                    stack.append((following, iter(sorted(successors[following]))))
                    break
            else:
                stack.pop()
                active.discard(vertex)
                done.add(vertex)
                finished.append(vertex)
    finished.reverse()
    return finished


@dataclass
class Maze:
    """A nine by nine sign maze: each sign lists the turns allowed when arriving with a heading."""

    name: str
    start: tuple[int, int]
    heading: str
    goal: tuple[int, int]
    signs: dict[tuple[int, int, str], frozenset[str]] = field(default_factory=dict)


def _take_int(tokens: deque) -> int:
    if not tokens:
        raise ValueError("unexpected end of maze description")
    token = tokens.popleft()
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected a number, got {token!r}") from None


def parse_mazes(text: str) -> list[Maze]:
    """Read maze descriptions until the input runs out or a header does not parse."""
    tokens = deque(text.split())
    mazes: list[Maze] = []
    while len(tokens) >= 6:
        header = [tokens[index] for index in range(6)]
        try:
            start_row, start_col, goal_row, goal_col = (int(header[i]) for i in (1, 2, 4, 5))
        except ValueError:
            break
        heading = header[3][0]
        if heading not in HEADINGS:
            raise ValueError(f"unknown heading {header[3]!r}")
        for _ in range(6):
            tokens.popleft()

        signs: dict[tuple[int, int, str], frozenset[str]] = {}
        while True:
            row = _take_int(tokens)
            if row == 0:
                break
            col = _take_int(tokens)
            while True:
                if not tokens:
                    raise ValueError("sign list is not closed with '*'")
                token = tokens.popleft()
                if token.startswith("*"):
                    break
                facing, turns = token[0], token[1:]
                if facing not in HEADINGS or any(turn not in TURNS for turn in turns):
                    raise ValueError(f"malformed sign {token!r}")
                key = (row, col, facing)
                signs[key] = signs.get(key, frozenset()) | frozenset(turns)
        mazes.append(
            Maze(header[0], (start_row, start_col), heading, (goal_row, goal_col), signs)
        )
    return mazes


def _walk(state: tuple[int, int, str], turn: str) -> tuple[int, int, str]:
    row, col, heading = state
    index = HEADINGS.index(heading)
    if turn == "L":
        index = (index + 3) % 4
    elif turn == "R":
        index = (index + 1) % 4
    heading = HEADINGS[index]
    dr, dc = _STEP[heading]
    return row + dr, col + dc, heading


def _inside(state: tuple[int, int, str]) -> bool:
    return 1 <= state[0] <= 9 and 1 <= state[1] <= 9


def shortest_route(maze: Maze) -> Optional[list[tuple[int, int]]]:
    """Return the shortest list of cells from start to goal, or None if there is none."""
    dr, dc = _STEP[maze.heading]
    first = (maze.start[0] + dr, maze.start[1] + dc, maze.heading)
    parent: dict[tuple[int, int, str], Optional[tuple[int, int, str]]] = {first: None}
    queue = deque([first])
    while queue:
        state = queue.popleft()
        if state[:2] == maze.goal:
            path: list[tuple[int, int]] = []
            node: Optional[tuple[int, int, str]] = state
            while node is not None:
                path.append((node[0], node[1]))
                node = parent[node]
            path.append(maze.start)
            path.reverse()
            return path
        allowed = maze.signs.get(state, frozenset())
        for turn in TURNS:
            if turn not in allowed:
                continue
            following = _walk(state, turn)
            if _inside(following) and following not in parent:
                parent[following] = state
                queue.append(following)
    return None


def format_route(maze: Maze, route: Optional[Sequence[tuple[int, int]]]) -> str:
    """Render a route as the maze name followed by lines of up to ten cells."""
    lines = [maze.name]
    if route is None:
        lines.append("  No Solution Possible")
    else:
        for offset in range(0, len(route), 10):
            chunk = route[offset:offset + 10]
            lines.append(" " + "".join(f" ({row},{col})" for row, col in chunk))
    return "\n".join(lines) + "\n"


def count_pipe_regions(grid: Sequence[str]) -> int:
    """Count connected regions of a grid of pipe tiles lettered A to K."""
    if not grid:
        return 0
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")
    for row in grid:
        for tile in row:
            if tile not in _PIPES:
                raise ValueError(f"unknown pipe tile {tile!r}")

    height = len(grid)
    seen: set[tuple[int, int]] = set()
    regions = 0
    for r, row in enumerate(grid):
        for c, _ in enumerate(row):
            if (r, c) in seen:
                continue
            regions += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                x, y = queue.popleft()
                for opening in _PIPES[grid[x][y]]:
                    dx, dy, back = _PIPE_MOVES[opening]
                    nx, ny = x + dx, y + dy
                    if (
                        0 <= nx < height
                        and 0 <= ny < width
                        and (nx, ny) not in seen
                        and back in _PIPES[grid[nx][ny]]
                    ):
                        seen.add((nx, ny))
                        queue.append((nx, ny))
    return regions


def min_bandwidth_ordering(spec: str) -> tuple[list[str], int]:
    """Find the lexicographically first ordering of minimum bandwidth for a graph like 'A:FB;B:GC'."""
    neighbours: dict[str, set[str]] = defaultdict(set)
    for part in spec.strip().split(";"):
        part = part.strip()
        if not part:
            continue
        head, _, tail = part.partition(":")
        head = head.strip()
        if len(head) != 1:
            raise ValueError(f"malformed entry {part!r}")
        neighbours[head]
        for other in tail.strip():
            neighbours[head].add(other)
            neighbours[other].add(head)
    nodes = sorted(neighbours)
    if not nodes:
        raise ValueError("the graph has no nodes")

    best_order: list[str] = []
    best_width = len(nodes) + 1
    order: list[str] = []
    placed: dict[str, int] = {}

    def extend(width: int) -> None:
        nonlocal best_order, best_width
        if len(order) == len(nodes):
            if width < best_width:
                best_width = width
                best_order = list(order)
            return
        position = len(order)
        for node in nodes:
            if node in placed:
                continue
            new_width = max(
                [width] + [position - placed[other] for other in neighbours[node] if other in placed]
            )
            if new_width >= best_width:
                continue
            placed[node] = position
            order.append(node)
            extend(new_width)
            order.pop()
            del placed[node]

    extend(1)
    return best_order, best_width