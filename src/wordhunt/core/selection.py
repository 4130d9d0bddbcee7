from __future__ import annotations
from typing import List, Optional, Sequence, Set, Tuple

from wordhunt.core.geometry import cell_id, direction_between, in_bounds, parse_cell_id
from wordhunt.core.wordsearch import Grid, Puzzle


def selection_path(start: Tuple[int, int], current: Tuple[int, int]) -> List[str]:
    """
    Caminho de ids de start até current (ambos (row, col)), só em uma das 8 retas.
    Se não estiverem alinhados, a seleção fica presa à célula inicial.
    """
    d = direction_between(start, current)
    if d is None:
        return [cell_id(*start)]
    steps = max(abs(current[0] - start[0]), abs(current[1] - start[1]))
    return [cell_id(start[0] + i * d.dy, start[1] + i * d.dx) for i in range(steps + 1)]


def read_path(grid: Grid, path: Sequence[str]) -> str:
    return "".join(grid[parse_cell_id(cid)].letter for cid in path)


def match_selection(
    puzzle: Puzzle,
    path: Sequence[str],
    found: Sequence[str] = (),
    *,
    allow_reversed: bool = True,
) -> Optional[str]:
    """Palavra (ainda não achada) formada pelo caminho; de trás pra frente se allow_reversed."""
    if any(not in_bounds(*parse_cell_id(cid), puzzle.size) for cid in path):
        return None
    word = read_path(puzzle.grid, path)
    candidates = [word, word[::-1]] if allow_reversed else [word]
    for w in candidates:
        if w in puzzle.placed_words and w not in found:
            return w
    return None


class GameState:
    """Estado de uma partida: palavras/células achadas e o log de mensagens."""

    def __init__(self, puzzle: Puzzle, *, allow_reversed: bool = True) -> None:
        self.puzzle = puzzle
        self.allow_reversed = allow_reversed
        self.found_words: List[str] = []
        self.found_cells: Set[str] = set()
        self.log: List[str] = []

    def select(self, path: Sequence[str]) -> Optional[str]:
        w = match_selection(self.puzzle, path, self.found_words, allow_reversed=self.allow_reversed)
        if w is None:
            return None
        self.found_words.append(w)
        self.found_cells.update(path)
        self.log.insert(0, f'You found "{w}"!')
        return w

    def select_between(self, start: Tuple[int, int], end: Tuple[int, int]) -> Optional[str]:
        n = self.puzzle.size
        if not (in_bounds(*start, n) and in_bounds(*end, n)):
            return None
        return self.select(selection_path(start, end))

    def reveal(self) -> None:
        """Trapaça: marca todas as palavras colocadas como achadas."""
        for loc in self.puzzle.locations:
            if loc.word not in self.found_words:
                self.found_words.append(loc.word)
            self.found_cells.update(loc.path)

    def is_found(self, cid: str) -> bool:
        return cid in self.found_cells

    @property
    def is_complete(self) -> bool:
        return all(w in self.found_words for w in self.puzzle.placed_words)
