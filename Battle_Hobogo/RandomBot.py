"""Bot that plays a uniformly random legal placement, or passes when it has none."""

import random

from Battle_Hobogo.Player import Player
from Battle_Hobogo.engine import hobogo_rules
from Battle_Hobogo.engine.moves import PASS, Place


class RandomBot(Player):
    def __init__(self, player, seed=None, rng=None):
        super().__init__(player)
        self.rng = rng or random.Random(seed)

    def next_move(self, board, num_players, deadline=None):
        legal = hobogo_rules.legal_moves(board, self.player, num_players)
        if not legal:
            return PASS
        return Place(self.rng.choice(legal))
