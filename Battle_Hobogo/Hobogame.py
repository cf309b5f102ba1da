"""Game loop, turn rotation, and undo for Hobogo matches."""

from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from Battle_Hobogo.Board import Board
from Battle_Hobogo.Player import HumanPlayer
from Battle_Hobogo.RandomBot import RandomBot
from Battle_Hobogo.engine import hobogo_rules, referee
from Battle_Hobogo.engine.moves import PASS, Pass, move_name
from Battle_Hobogo.utils import timer


PLAYER_NAMES = ("Yellow", "Pink", "Green", "Purple")
MAX_BOARD_SIZE = 26


def player_name(player, num_humans):
    name = PLAYER_NAMES[player] if player < len(PLAYER_NAMES) else str(player)
    if player >= num_humans:
        name += " (bot)"
    return name


@dataclass(frozen=True)
class Settings:
    board_size: int = 9
    num_humans: int = 1
    num_bots: int = 1
    humans_first: bool = True
    bot_think_time: float = 1.0
    move_timeout: float | None = None

    def __post_init__(self):
        # Columns are labelled A..Z
        if not 1 <= self.board_size <= MAX_BOARD_SIZE:
            raise ValueError(f"board_size must be between 1 and {MAX_BOARD_SIZE}")
        if self.num_humans < 0 or self.num_bots < 0:
            raise ValueError("player counts must not be negative")

    @property
    def num_players(self):
        return self.num_humans + self.num_bots

    def normalized(self):
        """Add humans until there are at least two players."""
        settings = self
        while settings.num_players < 2:
            settings = replace(settings, num_humans=settings.num_humans + 1)
        return settings

    @classmethod
    def from_dict(cls, data):
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})


def load_settings(path):
    """Read settings YAML; a missing file yields the defaults."""
    path = Path(path)
    if not path.exists():
        return Settings()
    with open(path, "r", encoding="utf-8") as f:
        return Settings.from_dict(yaml.safe_load(f) or {})


@dataclass(frozen=True)
class GameState:
    settings: Settings
    board: Board
    next_player: int
    consecutive_passes: int = 0

    @classmethod
    def new(cls, settings):
        first_player = 0 if settings.humans_first else settings.num_humans
        if first_player >= settings.num_players:
            first_player = 0
        return cls(settings, Board(settings.board_size), first_player)

    @property
    def num_players(self):
        return self.settings.num_players

    def is_valid(self):
        return self.num_players >= 2 and 0 <= self.next_player < self.num_players

    def is_human(self, player):
        return player < self.settings.num_humans


def advance(state, move):
    """Apply move for the player to act and hand the turn on. Raises MoveRejected."""
    board = hobogo_rules.apply_move(state.board, move, state.next_player, state.num_players)
    passes = state.consecutive_passes + 1 if isinstance(move, Pass) else 0
    return GameState(
        settings=state.settings,
        board=board,
        next_player=(state.next_player + 1) % state.num_players,
        consecutive_passes=passes,
    )


def game_over(board, num_players):
    """Default terminal oracle: nobody can place a stone any more."""
    return not any(hobogo_rules.has_legal_move(board, p, num_players) for p in range(num_players))


def make_players(settings, reader=input, seed=None):
    """Humans take the lowest indices, bots the rest."""
    players = []
    for idx in range(settings.num_players):
        if idx < settings.num_humans:
            players.append(HumanPlayer(idx, name=player_name(idx, settings.num_humans), reader=reader))
        else:
            bot_seed = None if seed is None else seed + idx
            players.append(RandomBot(idx, seed=bot_seed))
    return players


class Hobogame:
    def __init__(self, settings, players=None, logger=print, renderer=None, game_over=game_over, reader=input, seed=None):
        self.state = GameState.new(settings.normalized())
        self.reader = reader
        self.seed = seed
        self.players = players if players is not None else self._make_players(self.state.settings)
        if len(self.players) != self.state.num_players:
            raise ValueError(f"expected {self.state.num_players} players, got {len(self.players)}")
        self.logger = logger
        self.renderer = renderer
        self.game_over = game_over
        # entries are (GameState, players) so undo also restores the seating
        self.undo_stack = []
        self.move_index = 0

    def _make_players(self, settings):
        return make_players(settings, reader=self.reader, seed=self.seed)

    @property
    def settings(self):
        return self.state.settings

    def name(self, player):
        return player_name(player, self.settings.num_humans)

    def is_finished(self):
        state = self.state
        if state.consecutive_passes >= state.num_players:
            return True
        return self.game_over(state.board, state.num_players)

    def score(self):
        return hobogo_rules.score(self.state.board, self.state.num_players)

    def play_move(self, move):
        new_state = advance(self.state, move)
        self.undo_stack.append((self.state, self.players))
        self.state = new_state
        self.move_index += 1
        return new_state

    def undo(self):
        """Restore the previous state; returns False when there is nothing to undo."""
        if not self.undo_stack:
            return False
        self.state, self.players = self.undo_stack.pop()
        self.move_index = max(0, self.move_index - 1)
        return True

    def new_game(self, settings=None):
        if not self.state.board.is_empty():
            self.undo_stack.append((self.state, self.players))
        settings = (settings or self.settings).normalized()
        old = self.settings
        if (settings.num_humans, settings.num_bots) != (old.num_humans, old.num_bots):
            self.players = self._make_players(settings)
        self.state = GameState.new(settings)
        self.move_index = 0

    def _deadline(self, player):
        if self.state.is_human(player):
            return timer.deadline_after(self.settings.move_timeout)
        return timer.deadline_after(self.settings.bot_think_time)

    def _take_turn(self):
        """Ask the player to act until a move is accepted; returns that move."""
        state = self.state
        idx = state.next_player
        while True:
            deadline = self._deadline(idx)
            try:
                move = self.players[idx].next_move(state.board, state.num_players, deadline=deadline)
                referee.check_move(move, state.board, idx, state.num_players, deadline)
                return move
            except TimeoutError as exc:
                self.logger(f"{self.name(idx)} forfeits the turn - {exc}")
                return PASS
            except ValueError as exc:
                self.logger(f"Invalid move by {self.name(idx)} - {exc}")
                if not state.is_human(idx):
                    return PASS

    def play(self):
        """Run the game to the end. Returns the final score per player."""
        last_move = None
        while not self.is_finished():
            if self.renderer:
                self.renderer(self.state, last_move, False)

            idx = self.state.next_player
            move = self._take_turn()
            self.play_move(move)
            last_move = move
            self.logger(f"Move {self.move_index}: {self.name(idx)} {move_name(move)}")

        if self.renderer:
            self.renderer(self.state, last_move, True)

        final = self.score()
        standings = ", ".join(f"{self.name(p)} {s}" for p, s in enumerate(final))
        self.logger(f"Game over: {standings}")
        return final
