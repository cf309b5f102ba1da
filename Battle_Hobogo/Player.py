"""Abstract player interface for human or bot controllers."""

from Battle_Hobogo.engine.moves import parse_move
from Battle_Hobogo.utils import timer


class Player:
    def __init__(self, player):
        self.player = player

    def next_move(self, board, num_players, deadline=None):
        """Return a Pass or Place for the next turn."""
        raise NotImplementedError


class HumanPlayer(Player):
    """Console player typing "C4", "2 3" or "pass"."""

    def __init__(self, player, name=None, reader=input):
        super().__init__(player)
        self.name = name or f"p{player}"
        self.reader = reader

    def next_move(self, board, num_players, deadline=None):
        if timer.expired(deadline):
            raise TimeoutError("Move exceeded allotted time")
        raw = self.reader(f"{self.name} move (e.g. C4, 'x y' or pass): ")
        return parse_move(raw)
