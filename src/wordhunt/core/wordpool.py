from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, List, Optional
import json
import random
import re

MIN_LEN = 3
MAX_LEN = 10
WORD_COUNT = 10
MIN_WORDS = 5

# lista curta quando o sorteio não rende palavras suficientes
FALLBACK_WORDS: List[str] = ["FAITH", "SPIRIT", "VISION", "POWER", "MANIFEST", "RITUAL"]
# lista usada quando nem o banco de temas pôde ser lido
DEFAULT_WORDS: List[str] = ["NEXTJS", "REACT", "API", "ERROR"]

_NON_AZ = re.compile(r"[^A-Z]")


def sanitize(words: Iterable[str], min_len: int = MIN_LEN, max_len: int = MAX_LEN) -> List[str]:
    """Maiúsculas, só A–Z, tamanho [min_len, max_len], sem duplicadas (ordem preservada)."""
    out: List[str] = []
    for w in words or []:
        w = _NON_AZ.sub("", str(w or "").upper())
        if min_len <= len(w) <= max_len and w not in out:
            out.append(w)
    return out


def load_pool(path: Path) -> Dict[str, List[str]]:
    """
    Lê o banco de temas: {"tema": ["PALAVRA", ...], ...}.
    Erros de leitura/JSON sobem para quem chamou (o app decide o fallback).
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"banco de temas deve ser um objeto JSON: {path}")
    pool: Dict[str, List[str]] = {}
    for theme, words in data.items():
        if isinstance(words, list):
            pool[str(theme)] = [str(w) for w in words if isinstance(w, str)]
    return pool


def pick_words(
    pool: Dict[str, List[str]],
    rng: Optional[random.Random] = None,
    *,
    count: int = WORD_COUNT,
    mixed_chance: float = 0.3,
    theme: Optional[str] = None,
) -> List[str]:
    """
    Sorteia a lista da partida.
      - com chance `mixed_chance`: `count` palavras do banco inteiro;
      - senão: 6–8 de um tema e o resto de outros temas.
    Resultado saneado e limitado a `count`; abaixo de MIN_WORDS vira FALLBACK_WORDS.
    """
    rng = rng or random.Random()
    all_words = [w for words in pool.values() for w in words]
    themes = [t for t, words in pool.items() if words]
    if not themes:
        return list(FALLBACK_WORDS)

    if theme is None and rng.random() < mixed_chance:
        selected = rng.sample(all_words, min(count, len(all_words)))
    else:
        if theme not in pool:
            theme = rng.choice(themes)
        theme_words = list(pool[theme])
        rng.shuffle(theme_words)
        from_theme = theme_words[: 6 + rng.randrange(3)]

        others = [w for w in all_words if w not in pool[theme]]
        rng.shuffle(others)
        from_other = others[: max(0, count - len(from_theme))]

        selected = from_theme + from_other
        rng.shuffle(selected)

    words = sanitize(selected)[:count]
    if len(words) < MIN_WORDS:
        return list(FALLBACK_WORDS)
    return words
