"""
Testes do renderizador de imagens
"""

import pytest
from PIL import Image

from wordhunt.core.geometry import parse_cell_id
from wordhunt.core.wordsearch import generate
from wordhunt.rendering.wordsearch_renderer import WordSearchRenderer


@pytest.fixture
def puzzle():
    return generate(10, ["CAT", "DOG", "BIRD"], seed=4)


def _corner(renderer, cid):
    r, c = parse_cell_id(cid)
    return renderer.pad + c * renderer.cell + 3, renderer.pad + r * renderer.cell + 3


def _center(renderer, cid):
    r, c = parse_cell_id(cid)
    half = renderer.cell // 2
    return renderer.pad + c * renderer.cell + half, renderer.pad + r * renderer.cell + half


class TestWordSearchRenderer:

    def test_image_size(self, puzzle):
        img = WordSearchRenderer(puzzle, cell_size=40, padding=25).render()
        assert img.size == (450, 450)

    def test_fill_highlights_only_in_answers(self, puzzle):
        renderer = WordSearchRenderer(puzzle, highlight_style="fill")
        cid = puzzle.locations[0].path[0]
        assert renderer.render(answers=False).getpixel(_corner(renderer, cid)) == WordSearchRenderer.BACKGROUND
        assert renderer.render(answers=True).getpixel(_corner(renderer, cid)) == WordSearchRenderer.HIGHLIGHT_FILL

    def test_stroke_crosses_path(self, puzzle):
        renderer = WordSearchRenderer(puzzle, highlight_style="stroke")
        cid = puzzle.locations[0].path[1]
        img = renderer.render(answers=True)
        assert img.getpixel(_center(renderer, cid)) == WordSearchRenderer.HIGHLIGHT_STROKE

    def test_generate_image_writes_png(self, puzzle, tmp_path):
        out = tmp_path / "answers.png"
        WordSearchRenderer(puzzle).generate_image(str(out), answers=True)
        with Image.open(out) as img:
            assert img.format == "PNG"
