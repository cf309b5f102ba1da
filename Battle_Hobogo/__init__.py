"""Battle_Hobogo package exports."""

from .Board import Board, Coord
from .Hobogame import Hobogame, GameState, Settings
from .Player import Player, HumanPlayer
from .RandomBot import RandomBot

# Subpackages for the rules engine, renderers, and helpers
from . import engine, gui, utils

__all__ = [
    "Board",
    "Coord",
    "Hobogame",
    "GameState",
    "Settings",
    "Player",
    "HumanPlayer",
    "RandomBot",
    "engine",
    "gui",
    "utils",
]
