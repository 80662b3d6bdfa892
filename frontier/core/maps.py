"""Built-in map layout and starting room contents."""

from __future__ import annotations

# '#' barrier, '.' room, 'C' camp, 'S' start room, 'E' exit
DEFAULT_MAP: tuple[str, ...] = (
    "#########",
    "#S..#..E#",
    "#.#.#.#.#",
    "#..C....#",
    "#########",
)

# (row, col) -> ((item name, amount), ...)
DEFAULT_ROOM_ITEMS: dict[tuple[int, int], tuple[tuple[str, int], ...]] = {
    (1, 1): (("Apple", 3),),
    (2, 1): (("Bullet", 10),),
    (3, 3): (("Coffee", 2), ("Jerky", 4)),
    (1, 6): (("Map", 1),),
    (3, 6): (("Mushroom", 2), ("Antidote", 1), ("Whiskey", 1)),
    (3, 7): (("Rifle", 1),),
}
