"""Move variants (pass or placement) and their text forms."""

from dataclasses import dataclass

from Battle_Hobogo.Board import Coord, coord_name, parse_coord_name


@dataclass(frozen=True)
class Pass:
    def __str__(self):
        return "pass"


@dataclass(frozen=True)
class Place:
    coord: Coord

    def __post_init__(self):
        # Accept plain (x, y) tuples
        object.__setattr__(self, "coord", Coord(*self.coord))

    def __str__(self):
        return coord_name(self.coord)


PASS = Pass()


def move_name(move):
    if isinstance(move, Pass):
        return "pass"
    return coord_name(move.coord)


def parse_move(text):
    """
    Parse "pass", a chess name such as "C4", or two integers "x y".
    Raises ValueError on anything else; bounds are left to the rules engine.
    """
    raw = text.strip()
    if not raw:
        raise ValueError("Empty move")
    if raw.lower() in ("pass", "p"):
        return PASS

    parts = raw.split()
    if len(parts) == 2:
        try:
            x, y = int(parts[0]), int(parts[1])
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
        return Place(Coord(x, y))
    if len(parts) == 1:
        return Place(parse_coord_name(parts[0]))
    raise ValueError(f"Invalid move: {raw!r}")
