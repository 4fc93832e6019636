from collections import deque


def find_shortest_path(graph: dict[int, list[int]], start_id: int, end_id: int) -> list[int] | None:
    """
    Breadth-first search for the fewest-hop route from start_id to end_id.

    Returns the list of ids along the route (both ends included), or None when
    either endpoint is missing from the graph or no route exists. Among
    equal-length routes the one found first in neighbour-list order wins.
    """
    if start_id not in graph or end_id not in graph:
        return None
    queue = deque([[start_id]])
    visited = {start_id}
    while queue:
        path = queue.popleft()
        node = path[-1]
        if node == end_id:
            return path
        for nbr in graph.get(node, []):
            if nbr in visited:
                continue
            visited.add(nbr)
            queue.append(path + [nbr])
    return None


def path_edges(path: list[int] | None) -> list[tuple[int, int]]:
    if not path:
        return []
    return list(zip(path[:-1], path[1:]))
