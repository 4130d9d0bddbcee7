from __future__ import annotations
from typing import List, Tuple
from PIL import Image, ImageDraw, ImageFont

from wordhunt.core.geometry import parse_cell_id
from wordhunt.core.wordsearch import Puzzle


class WordSearchRenderer:
    """
    Renderizador de caça-palavras:
      - Exercício: grade + letras
      - Respostas: caminhos gravados destacados (fill) OU riscados (stroke)
    """

    BACKGROUND = (255, 255, 255)
    GRID = (30, 30, 30)
    TEXT = (0, 0, 0)
    HIGHLIGHT_FILL = (220, 240, 255)   # azul claro
    HIGHLIGHT_STROKE = (200, 0, 0)     # vermelho

    def __init__(
        self,
        puzzle: Puzzle,
        *,
        cell_size: int = 40,
        padding: int = 25,
        highlight_style: str = "fill",   # "fill" ou "stroke"
        stroke_width: int = 5,
        font_path: str | None = None
    ) -> None:
        self.puzzle = puzzle
        self.n = int(puzzle.size)
        self.cell = int(cell_size)
        self.pad = int(padding)
        self.style = str(highlight_style or "fill").lower()
        self.stroke_width = int(stroke_width)
        self.font = self._load_font(font_path)

    def _load_font(self, font_path: str | None):
        size = int(self.cell * 0.7)
        for candidate in (font_path, "DejaVuSansMono.ttf"):
            if not candidate:
                continue
            try:
                return ImageFont.truetype(candidate, size=size)
            except OSError:
                continue
        return ImageFont.load_default()

    # ---------- API ----------

    def render(self, answers: bool = False) -> Image.Image:
        W = H = self.pad * 2 + self.n * self.cell
        img = Image.new("RGB", (W, H), self.BACKGROUND)
        draw = ImageDraw.Draw(img)

        # FILL vai antes das letras (para não cobri-las)
        if answers and self.style == "fill":
            self._draw_answers_fill(draw)

        self._draw_grid(draw)
        self._draw_letters(draw)

        if answers and self.style != "fill":
            self._draw_answers_stroke(draw)
        return img

    def generate_image(self, filename: str, answers: bool = False) -> None:
        self.render(answers=answers).save(filename, format="PNG")

    # ---------- desenho básico ----------

    def _cell_box(self, r: int, c: int) -> Tuple[int, int, int, int]:
        x0 = self.pad + c * self.cell
        y0 = self.pad + r * self.cell
        return x0, y0, x0 + self.cell, y0 + self.cell

    def _draw_grid(self, draw: ImageDraw.ImageDraw) -> None:
        end = self.pad + self.n * self.cell
        draw.rectangle([self.pad, self.pad, end, end], outline=self.GRID, width=1)
        for i in range(1, self.n):
            p = self.pad + i * self.cell
            draw.line([self.pad, p, end, p], fill=self.GRID, width=1)
            draw.line([p, self.pad, p, end], fill=self.GRID, width=1)

    def _draw_letters(self, draw: ImageDraw.ImageDraw) -> None:
        """Centraliza o glifo compensando o offset (x0, y0) do bbox."""
        for cell in self.puzzle.grid:
            if not cell.letter:
                continue
            cx = self.pad + cell.x * self.cell + self.cell / 2
            cy = self.pad + cell.y * self.cell + self.cell / 2
            bx0, by0, bx1, by1 = draw.textbbox((0, 0), cell.letter, font=self.font)
            x = cx - (bx1 - bx0) / 2 - bx0
            y = cy - (by1 - by0) / 2 - by0
            draw.text((x, y), cell.letter, fill=self.TEXT, font=self.font)

    # ---------- gabarito ----------

    def _paths(self) -> List[List[Tuple[int, int]]]:
        return [[parse_cell_id(cid) for cid in loc.path] for loc in self.puzzle.locations if loc.path]

    def _draw_answers_fill(self, draw: ImageDraw.ImageDraw) -> None:
        for path in self._paths():
            for r, c in path:
                draw.rectangle(self._cell_box(r, c), fill=self.HIGHLIGHT_FILL)

    def _draw_answers_stroke(self, draw: ImageDraw.ImageDraw) -> None:
        half = self.cell / 2
        for path in self._paths():
            (r0, c0), (r1, c1) = path[0], path[-1]
            draw.line(
                [self.pad + c0 * self.cell + half, self.pad + r0 * self.cell + half,
                 self.pad + c1 * self.cell + half, self.pad + r1 * self.cell + half],
                fill=self.HIGHLIGHT_STROKE,
                width=self.stroke_width,
            )
