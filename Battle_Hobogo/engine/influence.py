"""Neighbor influence counts shared by claim resolution and legality checks."""

from Battle_Hobogo.Board import NEIGHBORS_8


def influence_counts(board, coord, num_players):
    """
    Count each player's stones among the 8 neighbors of coord.
    The cell itself is not counted; neighbors off the board contribute nothing.
    """
    x, y = coord
    counts = [0] * num_players
    for dx, dy in NEIGHBORS_8:
        owner = board.at(x + dx, y + dy)
        if owner is not None:
            counts[owner] += 1
    return counts
