"""Entry point for Battle Hobogo matches. Load config, wire players, start Hobogame."""

from dataclasses import replace
from pathlib import Path

from Battle_Hobogo.Hobogame import Hobogame, load_settings
from Battle_Hobogo.gui.text_view import TextView
from Battle_Hobogo.utils.cli import parse_args
from Battle_Hobogo.utils.logger import log_event


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from another directory."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def settings_from_args(args):
    settings = load_settings(resolve_project_path(args.settings))
    overrides = {}
    if args.board_size is not None:
        overrides["board_size"] = args.board_size
    if args.humans is not None:
        overrides["num_humans"] = args.humans
    if args.bots is not None:
        overrides["num_bots"] = args.bots
    if args.bots_first:
        overrides["humans_first"] = False
    if args.think_time is not None:
        overrides["bot_think_time"] = args.think_time
    if args.timeout is not None:
        overrides["move_timeout"] = args.timeout
    settings = replace(settings, **overrides)
    return settings.normalized()


def main(argv=None):
    args = parse_args(argv)
    settings = settings_from_args(args)
    log_event(
        f"Starting new {settings.board_size}x{settings.board_size} game with "
        f"{settings.num_humans} humans and {settings.num_bots} bots"
    )

    view = None if args.quiet else TextView()
    game = Hobogame(
        settings,
        seed=args.seed,
        logger=log_event,
        renderer=view.render if view else None,
    )
    result = game.play()
    best = max(result)
    winners = [game.name(p) for p, s in enumerate(result) if s == best]
    if len(winners) == 1:
        print(f"{winners[0]} wins with {best} points")
    else:
        print(f"Draw between {', '.join(winners)} ({best} points)")
    return result


if __name__ == "__main__":
    main()
