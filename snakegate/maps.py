"""The boards for each stage of the game.

Each board is 61 columns by 22 rows. ``'1'`` is a wall, ``'2'`` an
immune wall corner and ``' '`` open floor.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

WIDTH = 61
HEIGHT = 22

_Overlay = Mapping[Iterable[int], Iterable[tuple[int, str]]]


def _build(overlays: _Overlay) -> tuple[str, ...]:
    """Build a bordered board and stamp the given wall pieces onto it."""
    edge = "2" + "1" * (WIDTH - 2) + "2"
    inner = "1" + " " * (WIDTH - 2) + "1"
    rows = [list(edge if r in (0, HEIGHT - 1) else inner) for r in range(HEIGHT)]
    for row_numbers, pieces in overlays.items():
        pieces = list(pieces)
        for r in row_numbers:
            for col, text in pieces:
                rows[r][col : col + len(text)] = text
    return tuple("".join(row) for row in rows)


MAP1: tuple[str, ...] = _build({})

MAP2: tuple[str, ...] = _build(
    {
        (0, HEIGHT - 1): [(16, "2"), (44, "2")],
        (1, 2, 3, 4, 5, 16, 17, 18, 19, 20): [(16, "1"), (44, "1")],
        (7, 13): [(0, "2" + "1" * 10), (50, "1" * 10 + "2")],
    }
)

MAP3: tuple[str, ...] = _build(
    {
        (5,): [(0, "2" + "1" * 8), (52, "1" * 8 + "2")],
        (6,): [(8, "1" * 9), (44, "1" * 9)],
        (7,): [(16, "111"), (42, "111")],
        (15,): [(12, "111"), (42, "111")],
        (16,): [(6, "1" * 7), (44, "1" * 9)],
        (17,): [(0, "2" + "1" * 6), (52, "1" * 8 + "2")],
    }
)

MAP4: tuple[str, ...] = _build(
    {
        (2, 19): [(30, "1")],
        (3, 18): [(28, "11211")],
        (4, 17): [(26, "1" * 9)],
        (9, 13): [(8, "1"), (52, "1")],
        (10, 12): [(6, "121"), (52, "111")],
        (11,): [(4, "12221"), (52, "12221")],
    }
)

_STAGES: dict[int, tuple[str, ...]] = {1: MAP1, 2: MAP2, 3: MAP3, 4: MAP4}


def stage_map(stage: int) -> list[str]:
    """Return a fresh copy of the rows of the board for ``stage`` (1 to 4)."""
    try:
        return list(_STAGES[stage])
    except KeyError:
        raise ValueError(f"there is no stage {stage}") from None