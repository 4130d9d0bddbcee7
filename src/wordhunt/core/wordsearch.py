from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple
import random
import string

from wordhunt.core.geometry import (
    BY_NAME,
    Direction,
    DirectionSpec,
    cell_id,
    end_point,
    in_bounds,
    parse_cell_id,
    resolve_direction_set,
    walk,
)

MAX_ATTEMPTS = 100


class Cell:
    """Célula (x = coluna, y = linha). Coordenadas fixas; só a letra muda."""

    __slots__ = ("_x", "_y", "letter")

    def __init__(self, x: int, y: int, letter: str = "") -> None:
        self._x = int(x)
        self._y = int(y)
        self.letter = letter

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def id(self) -> str:
        return cell_id(self._y, self._x)

    def __repr__(self) -> str:
        return f"Cell(x={self._x}, y={self._y}, letter={self.letter!r})"


class Grid:
    """Grade quadrada size×size de Cells, endereçada por (row, col)."""

    def __init__(self, size: int) -> None:
        size = int(size)
        if size < 1:
            raise ValueError(f"tamanho de grade inválido: {size}")
        self.size = size
        self.rows: List[List[Cell]] = [
            [Cell(x=c, y=r) for c in range(size)] for r in range(size)
        ]

    @classmethod
    def from_letters(cls, rows: Sequence[str]) -> "Grid":
        g = cls(len(rows))
        for r, line in enumerate(rows):
            if len(line) != g.size:
                raise ValueError(f"linha {r} tem {len(line)} letras; esperado {g.size}")
            for c, ch in enumerate(line):
                g.rows[r][c].letter = ch
        return g

    def __getitem__(self, pos: Tuple[int, int]) -> Cell:
        r, c = pos
        return self.rows[r][c]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.rows:
            yield from row

    def by_id(self, cid: str) -> Cell:
        return self[parse_cell_id(cid)]

    def letter(self, row: int, col: int) -> str:
        return self.rows[row][col].letter

    def is_complete(self) -> bool:
        return all(len(cell.letter) == 1 for cell in self)

    def as_strings(self) -> List[str]:
        return ["".join(cell.letter or "." for cell in row) for row in self.rows]


@dataclass(frozen=True)
class PlacementResult:
    """Palavra colocada + caminho de ids (cabeça → cauda)."""
    word: str
    path: Tuple[str, ...]
    direction: Direction

    @property
    def start(self) -> Tuple[int, int]:
        return parse_cell_id(self.path[0])

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "path": list(self.path), "direction": self.direction.name}


@dataclass(frozen=True)
class Puzzle:
    grid: Grid
    placed_words: Tuple[str, ...] = ()
    locations: Tuple[PlacementResult, ...] = field(default_factory=tuple)

    @property
    def size(self) -> int:
        return self.grid.size

    def location_of(self, word: str) -> Optional[PlacementResult]:
        for loc in self.locations:
            if loc.word == word:
                return loc
        return None

    def letters(self) -> List[List[str]]:
        return [[cell.letter for cell in row] for row in self.grid.rows]

    # ------------------------- JSON -------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "size": self.size,
            "grid": self.grid.as_strings(),
            "placed_words": list(self.placed_words),
            "locations": [loc.to_dict() for loc in self.locations],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Puzzle":
        try:
            grid = Grid.from_letters(list(data["grid"]))
            locations = tuple(
                PlacementResult(
                    word=str(it["word"]),
                    path=tuple(str(cid) for cid in it["path"]),
                    direction=BY_NAME[str(it["direction"]).upper()],
                )
                for it in data.get("locations") or []
            )
            for loc in locations:
                for cid in loc.path:
                    parse_cell_id(cid)
            placed = tuple(str(w) for w in data.get("placed_words") or [loc.word for loc in locations])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"puzzle malformado: {e}") from e
        return cls(grid=grid, placed_words=placed, locations=locations)


class WordSearch:
    """
    Caça-palavras NxN por tentativa aleatória limitada.

    Para cada palavra (na ordem recebida) sorteia direção + início até
    `max_attempts` vezes; a primeira posição viável é gravada. Palavras que
    não couberem são descartadas (melhor esforço, sem exceção). No fim as
    células vazias recebem letras aleatórias do alfabeto.

      - WordSearch(words, size=10, direction_set="forward", allow_reverse=False)
      - generate() -> Puzzle
      - place_word(word) -> PlacementResult | None
      - can_place(word, row, col, direction) -> bool
    """

    def __init__(
        self,
        words: Sequence[str],
        size: int = 10,
        *,
        direction_set: Optional[DirectionSpec] = "forward",
        allow_reverse: bool = False,   # quando True, também sorteia o sentido oposto
        max_attempts: int = MAX_ATTEMPTS,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        alphabet: str = string.ascii_uppercase,
    ) -> None:
        self.words: List[str] = list(words or [])
        self.size = int(size)
        if self.size < 1:
            raise ValueError(f"tamanho de grade inválido: {size}")
        self.max_attempts = int(max_attempts)
        self.alphabet = alphabet
        self.rng = rng if rng is not None else random.Random(seed)

        dirs = list(resolve_direction_set(direction_set))
        if allow_reverse:
            dirs += [d.reversed() for d in dirs if d.reversed() not in dirs]
        self.directions: Tuple[Direction, ...] = tuple(dirs)

        self.grid = Grid(self.size)

    # ------------------------- API principal -------------------------

    def generate(self) -> Puzzle:
        """Coloca as palavras numa grade nova e preenche vazios com o alfabeto."""
        self.grid = Grid(self.size)
        placed: List[str] = []
        locations: List[PlacementResult] = []

        for w in self.words:
            result = self.place_word(w)
            if result is None:
                continue
            placed.append(w)
            locations.append(result)

        self._fill_empty_cells()
        puzzle = Puzzle(grid=self.grid, placed_words=tuple(placed), locations=tuple(locations))
        # a grade entregue deixa de pertencer ao gerador
        self.grid = Grid(self.size)
        return puzzle

    def place_word(self, word: str) -> Optional[PlacementResult]:
        for _ in range(self.max_attempts):
            d = self.rng.choice(self.directions)
            row = self.rng.randrange(self.size)
            col = self.rng.randrange(self.size)
            if self.can_place(word, row, col, d):
                return self._place(word, row, col, d)
        return None

    def can_place(self, word: str, row: int, col: int, d: Direction) -> bool:
        """Somente leitura: limites das pontas + letras compatíveis no caminho."""
        if not in_bounds(row, col, self.size):
            return False
        if not in_bounds(*end_point(row, col, d, len(word)), self.size):
            return False
        for (rr, cc), ch in zip(walk(row, col, d, len(word)), word):
            cell = self.grid.letter(rr, cc)
            if cell not in ("", ch):  # vazio ou igual
                return False
        return True

    # ------------------------- Primitivas de grade -------------------------

    def _place(self, word: str, row: int, col: int, d: Direction) -> PlacementResult:
        path: List[str] = []
        for (rr, cc), ch in zip(walk(row, col, d, len(word)), word):
            cell = self.grid[rr, cc]
            cell.letter = ch
            path.append(cell.id)
        return PlacementResult(word=word, path=tuple(path), direction=d)

    def _fill_empty_cells(self) -> None:
        for cell in self.grid:
            if cell.letter == "":
                cell.letter = self.rng.choice(self.alphabet)


def generate(
    size: int,
    words: Sequence[str],
    *,
    direction_set: Optional[DirectionSpec] = "forward",
    allow_reverse: bool = False,
    max_attempts: int = MAX_ATTEMPTS,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Puzzle:
    """Atalho: WordSearch(...).generate() numa instância descartável."""
    ws = WordSearch(
        words,
        size,
        direction_set=direction_set,
        allow_reverse=allow_reverse,
        max_attempts=max_attempts,
        seed=seed,
        rng=rng,
    )
    return ws.generate()
