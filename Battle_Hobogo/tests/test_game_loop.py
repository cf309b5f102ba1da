"""Tests for Hobogame turn handling, passes, undo, and end-of-game state."""

import pytest

from Battle_Hobogo.Board import Board
from Battle_Hobogo.Hobogame import GameState, Hobogame, Settings, advance, game_over, make_players, player_name
from Battle_Hobogo.Player import HumanPlayer, Player
from Battle_Hobogo.RandomBot import RandomBot
from Battle_Hobogo.engine.hobogo_rules import MoveRejected, is_valid_move
from Battle_Hobogo.engine.moves import PASS, Place


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, player, moves):
        super().__init__(player)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, board, num_players, deadline=None):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def test_new_state_first_player():
    assert GameState.new(Settings()).next_player == 0
    state = GameState.new(Settings(num_humans=2, num_bots=1, humans_first=False))
    assert state.next_player == 2
    assert state.is_valid()
    assert state.board.is_empty()


def test_normalized_adds_humans():
    s = Settings(num_humans=0, num_bots=0).normalized()
    assert s.num_humans == 2
    assert s.num_players == 2


def test_advance_rotates_players():
    state = GameState.new(Settings(board_size=5, num_humans=1, num_bots=2))
    state = advance(state, Place((0, 0)))
    assert state.next_player == 1
    state = advance(state, PASS)
    assert state.next_player == 2
    assert state.consecutive_passes == 1
    state = advance(state, Place((4, 4)))
    assert state.next_player == 0
    assert state.consecutive_passes == 0
    assert state.board.at(4, 4) == 2


def test_advance_rejection_keeps_state():
    state = advance(GameState.new(Settings(board_size=3, num_humans=2, num_bots=0)), Place((0, 0)))
    with pytest.raises(MoveRejected):
        advance(state, Place((1, 1)))
    assert state.next_player == 1
    assert state.board.stone_count() == 1


def test_human_reprompted_after_illegal_move():
    settings = Settings(board_size=3, num_humans=2, num_bots=0)
    p0 = SeqPlayer(0, [Place((0, 0)), PASS])
    p1 = SeqPlayer(1, [Place((1, 1)), Place((2, 2)), PASS])
    logs = []

    game = Hobogame(settings, players=[p0, p1], logger=logs.append)
    result = game.play()

    assert result == [3, 3]
    assert game.state.board.at(2, 2) == 1
    assert any("Invalid move" in line for line in logs)
    assert game.state.consecutive_passes == 2


def test_bot_illegal_move_becomes_pass():
    settings = Settings(board_size=3, num_humans=1, num_bots=1)
    p0 = SeqPlayer(0, [Place((0, 0)), PASS])
    bot = SeqPlayer(1, [Place((0, 0))])
    logs = []

    game = Hobogame(settings, players=[p0, bot], logger=logs.append)
    result = game.play()

    assert result == [4, 0]
    assert game.state.board.stone_count() == 1


def test_renderer_called_with_final_state():
    settings = Settings(board_size=3, num_humans=2, num_bots=0)
    seen = []

    def renderer(state, last_move, over):
        seen.append((state.board, last_move, over))

    game = Hobogame(settings, players=[SeqPlayer(0, [PASS]), SeqPlayer(1, [PASS])], logger=lambda *_: None, renderer=renderer)
    game.play()

    assert seen[-1][2] is True
    assert seen[-1][1] == PASS
    assert all(not over for _, _, over in seen[:-1])


def test_random_bots_play_to_the_end():
    settings = Settings(board_size=5, num_humans=0, num_bots=2)
    players = [RandomBot(0, seed=1), RandomBot(1, seed=2)]
    game = Hobogame(settings, players=players, logger=lambda *_: None)
    result = game.play()

    assert game.is_finished()
    assert len(result) == 2
    assert sum(result) <= 25
    assert game.state.board.stone_count() > 0


def test_random_bot_moves_are_legal_or_pass():
    b = Board(size=3).with_stone(0, 0, 0)
    bot = RandomBot(1, seed=3)
    for _ in range(10):
        mv = bot.next_move(b, 2)
        assert is_valid_move(b, mv.coord, 1, 2)
    full = Board.from_rows([[0, 1], [1, 0]])
    assert bot.next_move(full, 2) == PASS


def test_undo_and_new_game():
    game = Hobogame(Settings(board_size=4, num_humans=2, num_bots=0), players=[SeqPlayer(0, []), SeqPlayer(1, [])])
    assert game.undo() is False

    game.play_move(Place((1, 1)))
    game.play_move(Place((3, 3)))
    assert game.undo() is True
    assert game.state.next_player == 1
    assert game.state.board.at(3, 3) is None
    assert game.state.board.at(1, 1) == 0

    game.new_game()
    assert game.state.board.is_empty()
    assert game.undo() is True
    assert game.state.board.at(1, 1) == 0


def test_new_game_on_empty_board_keeps_undo_stack_unchanged():
    game = Hobogame(Settings(board_size=4, num_humans=2, num_bots=0), players=[SeqPlayer(0, []), SeqPlayer(1, [])])
    game.new_game()
    assert game.undo_stack == []


def test_player_count_mismatch_rejected():
    with pytest.raises(ValueError):
        Hobogame(Settings(num_humans=2, num_bots=1), players=[SeqPlayer(0, [])])


def test_default_game_over():
    assert not game_over(Board(size=3), 2)
    assert game_over(Board.from_rows([[0, 1], [1, 0]]), 2)


def test_make_players_and_names():
    players = make_players(Settings(num_humans=1, num_bots=2), reader=lambda _: "pass", seed=4)
    assert isinstance(players[0], HumanPlayer)
    assert all(isinstance(p, RandomBot) for p in players[1:])
    assert [p.player for p in players] == [0, 1, 2]
    assert players[0].next_move(Board(size=3), 3) == PASS
    assert player_name(0, 1) == "Yellow"
    assert player_name(1, 1) == "Pink (bot)"
    assert player_name(5, 9) == "5"


def test_undo_after_new_game_with_fewer_players_restores_seating():
    logs = []
    game = Hobogame(Settings(board_size=4, num_humans=0, num_bots=3), logger=logs.append, seed=5)
    game.play_move(Place((0, 0)))
    game.play_move(Place((3, 3)))

    game.new_game(Settings(board_size=4, num_humans=0, num_bots=2))
    assert len(game.players) == 2

    assert game.undo() is True
    assert game.state.num_players == 3
    assert len(game.players) == 3
    result = game.play()
    assert len(result) == 3


def test_new_game_rebuilds_players_with_injected_reader():
    game = Hobogame(
        Settings(board_size=3, num_humans=1, num_bots=1),
        reader=lambda _: "pass",
        logger=lambda *_: None,
    )
    game.new_game(Settings(board_size=3, num_humans=2, num_bots=0))
    assert all(isinstance(p, HumanPlayer) for p in game.players)
    assert game.players[1].next_move(game.state.board, 2) == PASS
