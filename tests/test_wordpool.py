"""
Testes do banco de palavras (sorteio + saneamento)
"""

import json
import random

import pytest

from wordhunt.core import wordpool


@pytest.fixture
def pool():
    return {
        "animals": ["CAT", "DOG", "HORSE", "TIGER", "LION", "ZEBRA", "MOUSE", "EAGLE", "SHARK", "OTTER"],
        "colors": ["RED", "BLUE", "GREEN", "YELLOW", "PURPLE", "ORANGE", "BLACK", "WHITE"],
        "tools": ["HAMMER", "SAW", "DRILL", "WRENCH", "PLIERS", "CHISEL"],
    }


class TestSanitize:

    def test_cleans_filters_and_dedupes(self):
        words = [" cat ", "Do-g", "ab", "ABCDEFGHIJK", "CAT", "mañana", 42]
        assert wordpool.sanitize(words) == ["CAT", "DOG", "MAANA"]

    def test_bounds_are_inclusive(self):
        assert wordpool.sanitize(["ABC", "ABCDEFGHIJ"]) == ["ABC", "ABCDEFGHIJ"]


class TestPickWords:

    def test_result_is_clean(self, pool):
        for seed in range(20):
            words = wordpool.pick_words(pool, random.Random(seed))
            assert 5 <= len(words) <= 10
            assert len(set(words)) == len(words)
            assert all(w.isalpha() and w.isupper() and 3 <= len(w) <= 10 for w in words)

    def test_themed_pick_is_mostly_from_theme(self, pool):
        for seed in range(10):
            words = wordpool.pick_words(pool, random.Random(seed), theme="animals")
            assert len(words) == 10
            assert sum(w in pool["animals"] for w in words) >= 6

    def test_mixed_pick(self, pool):
        words = wordpool.pick_words(pool, random.Random(1), mixed_chance=1.0, count=7)
        everything = {w for ws in pool.values() for w in ws}
        assert len(words) == 7
        assert set(words) <= everything

    def test_too_few_words_falls_back(self):
        tiny = {"x": ["AB", "CD", "EFG"]}
        assert wordpool.pick_words(tiny, random.Random(0)) == wordpool.FALLBACK_WORDS

    def test_empty_pool_falls_back(self):
        assert wordpool.pick_words({}, random.Random(0)) == wordpool.FALLBACK_WORDS


class TestLoadPool:

    def test_load(self, tmp_path, pool):
        path = tmp_path / "themes.json"
        path.write_text(json.dumps(pool), encoding="utf-8")
        assert wordpool.load_pool(path) == pool

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "themes.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError):
            wordpool.load_pool(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            wordpool.load_pool(tmp_path / "nope.json")
