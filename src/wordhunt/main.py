import typer
from typing_extensions import Annotated
from typing import Optional, List, Tuple
from pathlib import Path

from wordhunt.app import WordHuntApp
from wordhunt.core.selection import GameState

app = typer.Typer(add_completion=False, help="Gerador e verificador de caça-palavras.")


@app.command()
def generate(
    size: Annotated[Optional[int], typer.Option(
        "--size", "-s", min=1,
        help="Lado da grade (padrão: data/config.json ou 10)."
    )] = None,
    words: Annotated[Optional[List[str]], typer.Option(
        "--word", "-w",
        help="Palavra a esconder (repita a opção). Sem isso, sorteia do banco de temas."
    )] = None,
    theme: Annotated[Optional[str], typer.Option(
        "--theme", "-t",
        help="Tema do banco a usar no sorteio."
    )] = None,
    directions: Annotated[Optional[str], typer.Option(
        "--directions", "-d",
        help="'forward', 'all' ou lista como 'E,S,SE'."
    )] = None,
    allow_reverse: Annotated[Optional[bool], typer.Option(
        "--allow-reverse/--no-reverse",
        help="Permite também o sentido oposto de cada direção."
    )] = None,
    seed: Annotated[Optional[int], typer.Option(
        "--seed",
        help="Semente para geração determinística."
    )] = None,
    output_basename: Annotated[str, typer.Option(
        "--basename", "-b",
        help="Nome base para os arquivos de saída."
    )] = "cacapalavras",
    images: Annotated[bool, typer.Option(
        "--images/--no-images",
        help="Gera as imagens de exercício e respostas."
    )] = True,
):
    """Gera um caça-palavras e salva JSON, lista e imagens em output/."""
    puzzle = WordHuntApp().executar_gerador(
        output_basename=output_basename,
        size=size,
        words=words,
        theme=theme,
        direction_set=directions,
        allow_reverse=allow_reverse,
        seed=seed,
        images=images,
    )
    if puzzle is None:
        raise typer.Exit(code=1)
    print()
    print("\n".join(" ".join(row) for row in puzzle.letters()))


@app.command()
def verify(
    puzzle_file: Annotated[Path, typer.Argument(help="Arquivo *_puzzle.json gerado antes.")],
):
    """Confere se cada palavra declarada está mesmo na grade."""
    if not WordHuntApp().executar_verificacao(puzzle_file):
        raise typer.Exit(code=1)


@app.command()
def stress(
    runs: Annotated[int, typer.Option("--runs", "-n", min=1, help="Quantidade de gerações.")] = 1000,
    size: Annotated[Optional[int], typer.Option("--size", "-s", min=1, help="Lado da grade.")] = None,
    seed: Annotated[Optional[int], typer.Option("--seed", help="Semente.")] = None,
):
    """Gera e verifica muitas grades seguidas (QA do gerador)."""
    if not WordHuntApp().executar_stress(runs, size=size, seed=seed):
        raise typer.Exit(code=1)


@app.command()
def show(
    puzzle_file: Annotated[Path, typer.Argument(help="Arquivo *_puzzle.json.")],
    reveal: Annotated[bool, typer.Option("--reveal", help="Mostra as respostas em minúsculas.")] = False,
):
    """Imprime a grade no terminal."""
    puzzle = WordHuntApp().carregar_puzzle(puzzle_file)
    if puzzle is None:
        raise typer.Exit(code=1)
    game = GameState(puzzle)
    if reveal:
        game.reveal()
    _print_board(game)


def _print_board(game: GameState) -> None:
    """Grade com as células achadas em minúsculas + lista de palavras."""
    for row in game.puzzle.grid.rows:
        print(" ".join(c.letter.lower() if game.is_found(c.id) else c.letter for c in row))
    print()
    print(", ".join(sorted(game.puzzle.placed_words)))


def _parse_move(raw: str) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """'linha,coluna:linha,coluna' -> ((r0, c0), (r1, c1))."""
    start, end = raw.split(":")
    r0, c0 = (int(v) for v in start.split(","))
    r1, c1 = (int(v) for v in end.split(","))
    return (r0, c0), (r1, c1)


def _ask_moves():
    while True:
        raw = input("Seleção (linha,coluna:linha,coluna) [Enter=sair]: ").strip()
        if raw == "":
            return
        yield raw


@app.command()
def play(
    puzzle_file: Annotated[Path, typer.Argument(help="Arquivo *_puzzle.json.")],
    moves: Annotated[Optional[List[str]], typer.Argument(
        help="Seleções 'linha,coluna:linha,coluna'. Sem elas, pergunta no terminal."
    )] = None,
):
    """Joga no terminal: cada seleção é uma reta do início ao fim."""
    puzzle = WordHuntApp().carregar_puzzle(puzzle_file)
    if puzzle is None:
        raise typer.Exit(code=1)
    game = GameState(puzzle)
    _print_board(game)

    for raw in (moves or _ask_moves()):
        try:
            start, end = _parse_move(raw)
        except ValueError:
            print(f"Seleção inválida: {raw!r}")
            continue
        if game.select_between(start, end) is not None:
            print(f"✔️  {game.log[0]}")
        else:
            print("✗ Nenhuma palavra nessa seleção.")
        if game.is_complete:
            break

    print(f"Achadas: {len(game.found_words)}/{len(puzzle.placed_words)}")
    if game.is_complete:
        print("🎉 Tudo encontrado!")


def run():
    app()


if __name__ == "__main__":
    run()
