"""Hobogo rules: majority claims, placement legality, move application, scoring."""

from Battle_Hobogo.Board import Board, Coord, cell_at, coord_name, in_bounds
from Battle_Hobogo.engine.influence import influence_counts
from Battle_Hobogo.engine.moves import Pass, Place


class MoveRejected(ValueError):
    """Raised when a placement is not allowed for the moving player."""

    def __init__(self, coord, player, reason="illegal placement"):
        self.coord = coord
        self.player = player
        self.reason = reason
        super().__init__(f"{reason} at {_describe(coord)} for player {player}")


def _describe(coord):
    x, y = coord
    if 0 <= x < 26 and y >= 0:
        return coord_name(coord)
    return str(tuple(coord))


def claimed_by(board: Board, coord, num_players: int):
    """
    Return the player claiming coord, or None.

    A stone claims its own cell. An empty cell belongs to the player whose
    influence is strictly greater than every other player's; any tie at the top,
    including no influence at all, leaves it unclaimed.
    """
    occupant = cell_at(board, coord)
    if occupant is not None:
        return occupant

    counts = influence_counts(board, coord, num_players)
    best = max(counts)
    if counts.count(best) != 1:
        return None
    return counts.index(best)


def claim_map(board: Board, num_players: int):
    """Claims for every cell as rows[y][x]."""
    return [
        [claimed_by(board, (x, y), num_players) for x in range(board.size)]
        for y in range(board.size)
    ]


def is_valid_move(board: Board, coord, player: int, num_players: int) -> bool:
    """
    A placement is legal on an empty in-bounds cell where no player borders the
    cell more strongly than the mover does. Being tied for the top is enough.
    """
    if coord is None or isinstance(coord, Pass):
        return False
    if isinstance(coord, Place):
        coord = coord.coord
    if not in_bounds(board, coord):
        return False
    if cell_at(board, coord) is not None:
        return False

    counts = influence_counts(board, coord, num_players)
    own = counts[player]
    return all(count <= own for count in counts)


def legal_moves(board: Board, player: int, num_players: int):
    """All legal placements for player, row-major."""
    return [c for c in board.coords() if is_valid_move(board, c, player, num_players)]


def has_legal_move(board: Board, player: int, num_players: int) -> bool:
    return any(is_valid_move(board, c, player, num_players) for c in board.coords())


def apply_move(board: Board, move, player: int, num_players: int) -> Board:
    """
    Return the snapshot after `player` makes `move`. The input board is never
    modified. Passing returns an equal, independent board; an illegal placement
    raises MoveRejected.
    """
    if isinstance(move, Pass):
        return Board(board.size, board.cells)

    coord = move.coord if isinstance(move, Place) else Coord(*move)
    if not in_bounds(board, coord):
        raise MoveRejected(coord, player, "move out of bounds")
    if cell_at(board, coord) is not None:
        raise MoveRejected(coord, player, "cell already occupied")
    if not is_valid_move(board, coord, player, num_players):
        raise MoveRejected(coord, player, "cell dominated by an opponent")
    return board.with_stone(coord.x, coord.y, player)


def preview_move(board: Board, coord, player: int, num_players: int) -> Board:
    """Board as it would look after a hovered placement, or unchanged if illegal."""
    if coord is None or not is_valid_move(board, coord, player, num_players):
        return board
    return board.with_stone(coord[0], coord[1], player)


def score(board: Board, num_players: int):
    """Number of cells claimed by each player."""
    totals = [0] * num_players
    for coord in board.coords():
        claimer = claimed_by(board, coord, num_players)
        if claimer is not None:
            totals[claimer] += 1
    return totals
