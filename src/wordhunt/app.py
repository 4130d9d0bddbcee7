# src/wordhunt/app.py
from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Dict, List, Optional

from wordhunt.core import wordpool
from wordhunt.core.verifier import check_locations, stress, verify
from wordhunt.core.wordsearch import MAX_ATTEMPTS, Puzzle, WordSearch
from wordhunt.rendering.wordsearch_renderer import WordSearchRenderer


DEFAULTS: Dict = {
    "size": 10,
    "direction_set": "forward",
    "allow_reverse": False,
    "max_attempts": MAX_ATTEMPTS,
    "word_count": wordpool.WORD_COUNT,
    "mixed_chance": 0.3,
    "themes_file": "data/wordlists/themes.json",
    "highlight_style": "fill",
    "stroke_width": 5,
}


class WordHuntApp:
    """
    Orquestrador da aplicação:
      - Lê config (data/config.json)
      - Resolve caminhos (data/, output/)
      - Sorteia palavras do banco de temas
      - Gera o caça-palavras e confere com o verificador
      - Salva JSON, lista de palavras e imagens (exercício/respostas)
    """

    # -------------------- Infra --------------------
    def __init__(self, project_root: Optional[Path] = None) -> None:
        self.project_root = Path(project_root) if project_root else self._detect_project_root()
        self.data_dir = self.project_root / "data"
        self.output_dir = self.project_root / "output"
        self.config_path = self.data_dir / "config.json"

        cfg = self._load_config() or {}
        self.settings: Dict = {**DEFAULTS, **(cfg.get("wordsearch") or {})}

    def _detect_project_root(self) -> Path:
        here = Path(__file__).resolve()
        for p in [Path.cwd(), *here.parents]:
            if (p / "data").exists():
                return p
        return Path.cwd()

    def _as_path(self, rel: str | Path) -> Path:
        p = Path(rel)
        return p if p.is_absolute() else (self.project_root / p)

    # -------------------- Config --------------------
    def _load_config(self) -> Optional[Dict]:
        if not self.config_path.exists():
            return None
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"⚠️  Config ignorada ({self.config_path.name}): {e}")
            return None
        return data if isinstance(data, dict) else None

    def _reverso_habilitado(self, override: Optional[bool] = None) -> bool:
        """Só um booleano de verdade liga o sentido reverso (ex.: "false" em texto não liga)."""
        if override is not None:
            return override is True
        value = self.settings["allow_reverse"]
        if not isinstance(value, bool):
            print(f"⚠️  allow_reverse deve ser true/false; valor {value!r} ignorado.")
        return value is True

    # -------------------- Palavras --------------------
    def carregar_palavras(self, rng: random.Random, theme: Optional[str] = None) -> List[str]:
        """Sorteia as palavras do banco de temas; sem banco, usa a lista padrão."""
        themes_path = self._as_path(self.settings["themes_file"])
        try:
            pool = wordpool.load_pool(themes_path)
        except (OSError, ValueError) as e:
            print(f"⚠️  Não foi possível carregar palavras ({themes_path.name}): {e}")
            return list(wordpool.DEFAULT_WORDS)

        if theme is not None and theme not in pool:
            print(f"⚠️  Tema '{theme}' não existe no banco; sorteando outro.")

        words = wordpool.pick_words(
            pool,
            rng,
            count=int(self.settings["word_count"]),
            mixed_chance=float(self.settings["mixed_chance"]),
            theme=theme,
        )
        print(f"📖 {len(words)} palavras sorteadas de {len(pool)} temas.")
        return words

    # -------------------- Puzzle JSON --------------------
    def carregar_puzzle(self, path: Path) -> Optional[Puzzle]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return Puzzle.from_dict(json.load(f))
        except (OSError, json.JSONDecodeError, ValueError) as e:
            print(f"❌ ERRO ao ler puzzle '{path}': {e}")
            return None

    def salvar_puzzle(self, puzzle: Puzzle, path: Path) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(puzzle.to_dict(), f, ensure_ascii=False, indent=2)

    # ======================================================================
    #                            WORDSEARCH
    # ======================================================================
    def executar_gerador(
        self,
        *,
        output_basename: str = "cacapalavras",
        size: Optional[int] = None,
        words: Optional[List[str]] = None,
        theme: Optional[str] = None,
        direction_set: Optional[str] = None,
        allow_reverse: Optional[bool] = None,
        seed: Optional[int] = None,
        images: bool = True,
    ) -> Optional[Puzzle]:
        s = self.settings
        size = int(size or s["size"])
        rng = random.Random(seed)

        if words:
            words = wordpool.sanitize(words)
            if not words:
                print("❌ ERRO: Nenhuma palavra válida (A–Z, 3 a 10 letras).")
                return None
        else:
            words = self.carregar_palavras(rng, theme=theme)

        try:
            ws = WordSearch(
                words,
                size,
                direction_set=direction_set or s["direction_set"],
                allow_reverse=self._reverso_habilitado(allow_reverse),
                max_attempts=int(s["max_attempts"]),
                rng=rng,
            )
        except ValueError as e:
            print(f"❌ ERRO: {e}")
            return None
        puzzle = ws.generate()

        dropped = [w for w in words if w not in puzzle.placed_words]
        print(f"✅ {len(puzzle.placed_words)}/{len(words)} palavras posicionadas numa grade {size}x{size}.")
        if dropped:
            print(f"ℹ️  Não couberam: {', '.join(dropped)}")

        errors = verify(puzzle.grid, puzzle.placed_words) + check_locations(puzzle)
        for err in errors:
            print(f"⚠️  {err}")

        self.output_dir.mkdir(parents=True, exist_ok=True)
        json_path = self.output_dir / f"{output_basename}_puzzle.json"
        self.salvar_puzzle(puzzle, json_path)

        words_path = self.output_dir / f"{output_basename}_words.txt"
        with open(words_path, "w", encoding="utf-8") as f:
            for i, w in enumerate(sorted(puzzle.placed_words), 1):
                f.write(f"{i}. {w}\n")

        saidas = [json_path, words_path]
        if images:
            renderer = WordSearchRenderer(
                puzzle,
                cell_size=40,
                padding=25,
                highlight_style=s["highlight_style"],
                stroke_width=int(s["stroke_width"]),
            )
            ex = self.output_dir / f"{output_basename}_exercicio.png"
            an = self.output_dir / f"{output_basename}_respostas.png"
            renderer.generate_image(filename=str(ex), answers=False)
            renderer.generate_image(filename=str(an), answers=True)
            saidas += [ex, an]

        print(f"📦 Saída: {self.output_dir}")
        for p in saidas:
            print(f"   - {p.name}")
        return puzzle

    def executar_verificacao(self, path: Path) -> bool:
        puzzle = self.carregar_puzzle(path)
        if puzzle is None:
            return False
        errors = verify(puzzle.grid, puzzle.placed_words) + check_locations(puzzle)
        if errors:
            for err in errors:
                print(f"❌ {err}")
            return False
        print(f"✔️  {len(puzzle.placed_words)} palavras conferidas, nenhuma violação.")
        return True

    def executar_stress(self, runs: int, size: Optional[int] = None, seed: Optional[int] = None) -> bool:
        rng = random.Random(seed)
        pool = self.carregar_palavras(rng)
        print(f"🧪 Rodando {runs} gerações {size or self.settings['size']}x{size or self.settings['size']}...")
        failures = stress(
            runs,
            pool,
            int(size or self.settings["size"]),
            direction_set=self.settings["direction_set"],
            allow_reverse=self._reverso_habilitado(),
            seed=seed,
        )
        if failures:
            for f in failures[:20]:
                print(f"❌ {f}")
            print(f"Falhou com {len(failures)} erros.")
            return False
        print(f"✔️  Passou em {runs} rodadas.")
        return True
