from __future__ import annotations
from typing import Dict, List, Optional, Sequence
import random

from wordhunt.core.geometry import (
    ALL_DIRECTIONS,
    Direction,
    cell_id,
    direction_between,
    end_point,
    in_bounds,
    parse_cell_id,
    walk,
)
from wordhunt.core.wordsearch import Grid, Puzzle, generate


def _matches(grid: Grid, word: str, row: int, col: int, d: Direction) -> bool:
    if not in_bounds(*end_point(row, col, d, len(word)), grid.size):
        return False
    return all(
        grid.letter(rr, cc) == ch
        for (rr, cc), ch in zip(walk(row, col, d, len(word)), word)
    )


def find_word(
    grid: Grid,
    word: str,
    directions: Sequence[Direction] = ALL_DIRECTIONS,
) -> Optional[List[str]]:
    """Primeira ocorrência em linha reta (varredura completa), como caminho de ids."""
    n = grid.size
    for r in range(n):
        for c in range(n):
            for d in directions:
                if _matches(grid, word, r, c, d):
                    return [cell_id(rr, cc) for rr, cc in walk(r, c, d, len(word))]
    return None


def verify(grid: Grid, placed_words: Sequence[str]) -> List[str]:
    """
    Refaz a busca do zero para cada palavra declarada como colocada, nas 8
    direções, sem confiar nos caminhos gravados pelo gerador.
    Lista vazia = todas encontradas.
    """
    errors: List[str] = []
    for w in placed_words:
        if find_word(grid, w) is None:
            errors.append(f'Word "{w}" was in placedWords but NOT found in grid!')
    return errors


def check_locations(puzzle: Puzzle) -> List[str]:
    """Confere os caminhos gravados: letras, passo constante, limites e cruzamentos."""
    errors: List[str] = []
    n = puzzle.size
    seen: Dict[str, str] = {}

    for loc in puzzle.locations:
        w = loc.word
        if len(loc.path) != len(w):
            errors.append(f'"{w}": caminho com {len(loc.path)} células para {len(w)} letras')
            continue
        cells = [parse_cell_id(cid) for cid in loc.path]
        if any(not in_bounds(r, c, n) for r, c in cells):
            errors.append(f'"{w}": caminho sai da grade')
            continue
        for a, b in zip(cells, cells[1:]):
            if direction_between(a, b) != loc.direction or max(abs(b[0] - a[0]), abs(b[1] - a[1])) != 1:
                errors.append(f'"{w}": passo {a}->{b} não segue {loc.direction.name}')
                break
        for (r, c), ch in zip(cells, w):
            if puzzle.grid.letter(r, c) != ch:
                errors.append(f'"{w}": célula {cell_id(r, c)} tem {puzzle.grid.letter(r, c)!r}, esperado {ch!r}')
                break
        for cid, ch in zip(loc.path, w):
            prev = seen.setdefault(cid, ch)
            if prev != ch:
                errors.append(f'"{w}": cruzamento em {cid} discorda ({prev!r} x {ch!r})')
    return errors


def stress(
    runs: int,
    pool: Sequence[str],
    size: int = 10,
    *,
    direction_set="forward",
    allow_reverse: bool = False,
    seed: Optional[int] = None,
) -> List[str]:
    """Gera + verifica `runs` vezes com o pool embaralhado; retorna as falhas encontradas."""
    rng = random.Random(seed)
    failures: List[str] = []
    for i in range(int(runs)):
        words = list(pool)
        rng.shuffle(words)
        puzzle = generate(size, words, direction_set=direction_set, allow_reverse=allow_reverse, rng=rng)
        for err in verify(puzzle.grid, puzzle.placed_words) + check_locations(puzzle):
            failures.append(f"run {i}: {err}")
    return failures
