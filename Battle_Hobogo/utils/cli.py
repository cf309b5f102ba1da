"""CLI options for board size, player counts, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle Hobogo (territory by majority influence)")
    parser.add_argument("--board-size", type=int, help="Board side length (default from settings)")
    parser.add_argument("--humans", type=int, help="Number of human players")
    parser.add_argument("--bots", type=int, help="Number of bot players")
    parser.add_argument("--bots-first", action="store_true", help="Let the first bot open the game")
    parser.add_argument("--think-time", type=float, help="Seconds a bot may spend per move")
    parser.add_argument("--timeout", type=float, help="Seconds per human move (default: unlimited)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for bots")
    parser.add_argument("--quiet", action="store_true", help="Do not draw the board between moves")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    return parser.parse_args(argv)
