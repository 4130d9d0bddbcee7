from __future__ import annotations
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union


class Direction(NamedTuple):
    """Passo unitário (dx, dy) em coordenadas de tela: dy > 0 desce."""
    dx: int
    dy: int

    @property
    def name(self) -> str:
        return _NAMES.get((self.dx, self.dy), "?")

    def reversed(self) -> "Direction":
        return Direction(-self.dx, -self.dy)


# Direções (dx, dy): H/V + diagonais (ambas inclinações)
E = Direction(1, 0)
W = Direction(-1, 0)
S = Direction(0, 1)
N = Direction(0, -1)
SE = Direction(1, 1)
NW = Direction(-1, -1)
NE = Direction(1, -1)
SW = Direction(-1, 1)

ALL_DIRECTIONS: Tuple[Direction, ...] = (E, W, S, N, SE, NW, NE, SW)   # → ← ↓ ↑ ↘ ↖ ↗ ↙
# leitura "natural": direita, baixo, diagonal descendente
FORWARD_DIRECTIONS: Tuple[Direction, ...] = (E, S, SE)

_NAMES: Dict[Tuple[int, int], str] = {
    (1, 0): "E", (-1, 0): "W", (0, 1): "S", (0, -1): "N",
    (1, 1): "SE", (-1, -1): "NW", (1, -1): "NE", (-1, 1): "SW",
}
BY_NAME: Dict[str, Direction] = {name: Direction(*d) for d, name in _NAMES.items()}

DIRECTION_SETS: Dict[str, Tuple[Direction, ...]] = {
    "all": ALL_DIRECTIONS,
    "forward": FORWARD_DIRECTIONS,
}

DirectionSpec = Union[str, Iterable[Union[str, Direction, Tuple[int, int]]]]


def resolve_direction_set(value: Optional[DirectionSpec]) -> Tuple[Direction, ...]:
    """
    Aceita o nome de um conjunto ("all", "forward"), uma lista de nomes
    ("E", "SE", ...) ou uma lista de pares (dx, dy). Nomes desconhecidos -> ValueError.
    """
    if value is None:
        return FORWARD_DIRECTIONS
    if isinstance(value, str):
        key = value.strip().lower()
        if key in DIRECTION_SETS:
            return DIRECTION_SETS[key]
        # "E,S,SE" também vale
        value = [p for p in value.replace(";", ",").split(",") if p.strip()]

    out: List[Direction] = []
    for item in value:
        if isinstance(item, str):
            d = BY_NAME.get(item.strip().upper())
            if d is None:
                raise ValueError(f"direção desconhecida: {item!r}")
        else:
            dx, dy = item
            if (dx, dy) not in _NAMES:
                raise ValueError(f"direção inválida: {(dx, dy)!r}")
            d = Direction(dx, dy)
        if d not in out:
            out.append(d)
    if not out:
        raise ValueError("conjunto de direções vazio")
    return tuple(out)


# ------------------------- Células -------------------------

def cell_id(row: int, col: int) -> str:
    return f"{row}-{col}"


def parse_cell_id(cid: str) -> Tuple[int, int]:
    try:
        r, c = cid.split("-")
        return int(r), int(c)
    except ValueError:
        raise ValueError(f"id de célula inválido: {cid!r}") from None


def in_bounds(row: int, col: int, size: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def end_point(row: int, col: int, d: Direction, length: int) -> Tuple[int, int]:
    """Última célula de uma palavra de `length` letras a partir de (row, col)."""
    return row + (length - 1) * d.dy, col + (length - 1) * d.dx


def walk(row: int, col: int, d: Direction, length: int) -> List[Tuple[int, int]]:
    return [(row + i * d.dy, col + i * d.dx) for i in range(length)]


def direction_between(start: Sequence[int], end: Sequence[int]) -> Optional[Direction]:
    """
    Passo unitário que liga start→end (ambos (row, col)) quando estão numa das
    8 retas; None se não estiverem alinhados ou forem a mesma célula.
    """
    dy = end[0] - start[0]
    dx = end[1] - start[1]
    if dx == 0 and dy == 0:
        return None
    if dx != 0 and dy != 0 and abs(dx) != abs(dy):
        return None
    return Direction((dx > 0) - (dx < 0), (dy > 0) - (dy < 0))
