"""Console renderer: stones, territory, and standings."""

from Battle_Hobogo.Board import column_name, row_name
from Battle_Hobogo.Hobogame import player_name
from Battle_Hobogo.engine import hobogo_rules
from Battle_Hobogo.engine.moves import move_name


class TextView:
    STONES = "YPGVKLMNO"
    BLOCKED = "x"
    FREE = "."

    def __init__(self, out=print):
        self.out = out

    def stone_glyph(self, player):
        return self.STONES[player] if player < len(self.STONES) else "#"

    def cell_glyph(self, board, coord, state, claimer=None):
        """Glyph for one cell; `claimer` is taken from a precomputed claim map when given."""
        n = state.num_players
        occupant = board.at(*coord)
        if occupant is not None:
            return self.stone_glyph(occupant)

        if claimer is None:
            claimer = hobogo_rules.claimed_by(board, coord, n)
        if claimer is not None:
            return self.stone_glyph(claimer).lower()

        # Mark cells the human to move may not play on
        mover = state.next_player
        if state.is_human(mover) and not hobogo_rules.is_valid_move(board, coord, mover, n):
            return self.BLOCKED
        return self.FREE

    def board_lines(self, state, hovered=None):
        board = state.board
        if hovered is not None:
            board = hobogo_rules.preview_move(board, hovered, state.next_player, state.num_players)
        claims = hobogo_rules.claim_map(board, state.num_players)

        lines = []
        for y in range(board.size):
            glyphs = " ".join(self.cell_glyph(board, (x, y), state, claims[y][x]) for x in range(board.size))
            lines.append(f"{row_name(y):>3} {glyphs}")
        lines.append("    " + " ".join(column_name(x) for x in range(board.size)))
        return lines

    def status_lines(self, state, over=False):
        num_humans = state.settings.num_humans
        name = player_name(state.next_player, num_humans)
        lines = []
        if over:
            lines.append("Game over!")
        elif state.is_human(state.next_player):
            lines.append(f"{name} to play")
        else:
            lines.append(f"{name} is thinking...")
        lines.append("Standings:")
        for player, points in enumerate(hobogo_rules.score(state.board, state.num_players)):
            lines.append(f"  {self.stone_glyph(player)} {player_name(player, num_humans):<14} {points:>3}")
        return lines

    def render(self, state, last_move=None, over=False, hovered=None):
        if last_move is not None:
            self.out(f"Last move: {move_name(last_move)}")
        for line in self.board_lines(state, hovered=hovered):
            self.out(line)
        for line in self.status_lines(state, over=over):
            self.out(line)
        self.out()
