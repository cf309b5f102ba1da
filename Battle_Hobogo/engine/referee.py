"""Move validation and time control for submitted moves."""

import logging

from Battle_Hobogo.engine import hobogo_rules
from Battle_Hobogo.engine.moves import Pass, Place
from Battle_Hobogo.utils import timer


LOGGER = logging.getLogger(__name__)


def check_move(move, board, player, num_players, deadline=None):
    """
    Validate a move against the deadline and the placement rules.
    Raises TimeoutError or MoveRejected on invalid moves; passing is always allowed.
    """
    if timer.expired(deadline):
        raise TimeoutError("Move exceeded allotted time")

    if isinstance(move, Pass):
        return True
    if not isinstance(move, Place):
        raise ValueError(f"Unsupported move: {move!r}")

    if not hobogo_rules.is_valid_move(board, move.coord, player, num_players):
        LOGGER.debug("rejected %s for player %d", move, player)
        raise hobogo_rules.MoveRejected(move.coord, player)

    return True
