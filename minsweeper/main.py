import argparse
import random
from pathlib import Path
from typing import List, Optional

from .config import BENCHMARK_CONFIG, DEFAULT_SOLVER
from .lib.s0_board import ConventionalSize, GameState, GameStatus, format_board, parse_board
from .lib.s1_game import GenerationInterruptedError, MinsweeperGame
from .lib.s2_solver import Action, Move, Solver, available_solvers, get_solver
from .lib.s7_debug import DebugLogger
from .services import BenchmarkService

SIZE_NAMES = [size.name.lower() for size in ConventionalSize]


def describe_move(move: Optional[Move]) -> List[str]:
    """Lignes lisibles décrivant un coup proposé."""
    if move is None:
        return ["Aucun coup certain"]
    lines = []
    for click in sorted(move.clicks, key=lambda c: (c.point.y, c.point.x)):
        kind = "révéler" if click.action == Action.LEFT else "drapeau"
        lines.append(f"{kind} ({click.point.x}, {click.point.y})")
    if move.reason is not None:
        lines.append(f"raison: {move.reason.logic.description}")
    return lines


def print_state(state: GameState) -> None:
    for row in format_board(state.board):
        print(row)
    print(f"Mines restantes: {state.remaining_mines}")


def play(size_name: str, generator: Optional[Solver], hint_solver: Solver, seed: Optional[int]) -> GameStatus:
    """Partie texte interactive : `l x y`, `r x y`, `h`, `q`."""
    game = MinsweeperGame(
        ConventionalSize.from_name(size_name),
        rng=random.Random(seed) if seed is not None else None,
    )
    state = game.start(generator)
    print("Commandes : l x y (révéler), r x y (drapeau), h (indice), q (quitter)")

    while state.status == GameStatus.PLAYING:
        print_state(state)
        try:
            command = input("> ").split()
        except EOFError:
            break
        if not command:
            continue

        if command[0] == "q":
            break
        if command[0] == "h":
            for line in describe_move(hint_solver.solve(state)):
                print(f"[HINT] {line}")
            continue
        if command[0] in ("l", "r") and len(command) == 3:
            try:
                x, y = int(command[1]), int(command[2])
            except ValueError:
                print(f"[ERREUR] Coordonnées invalides: {' '.join(command[1:])}")
                continue
            if command[0] == "l":
                state = game.left_click(x, y)
            else:
                state = game.right_click(x, y)
            continue
        print(f"[ERREUR] Commande inconnue: {' '.join(command)}")

    if state.status in (GameStatus.WON, GameStatus.LOST):
        print_state(state)
        print("[FIN] Gagné" if state.status == GameStatus.WON else "[FIN] Perdu")
    return state.status


def hint(path: str, mines: int, solver: Solver) -> Optional[Move]:
    """Lit un plateau en notation texte et affiche le coup proposé."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    state = parse_board(lines, mines)
    move = solver.solve(state)
    print(f"[HINT] {solver.name}")
    for line in describe_move(move):
        print(f"[HINT] {line}")
    return move


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minsweeper", description="Démineur et solveurs")
    subparsers = parser.add_subparsers(dest="command", required=True)

    play_parser = subparsers.add_parser("play", help="Jouer une partie en mode texte")
    play_parser.add_argument(
        "--size",
        default="beginner",
        choices=SIZE_NAMES,
        help="Taille du plateau",
    )
    play_parser.add_argument(
        "--solver",
        help="Solveur garantissant une partie résolvable (parmi: %s)" % ", ".join(available_solvers()),
    )
    play_parser.add_argument(
        "--hint-solver",
        default=DEFAULT_SOLVER,
        help="Solveur utilisé pour la commande h",
    )
    play_parser.add_argument("--seed", type=int, help="Graine du générateur aléatoire")

    hint_parser = subparsers.add_parser("hint", help="Proposer un coup pour un plateau texte")
    hint_parser.add_argument("file", help="Fichier du plateau ('1'-'8', '.', '!', 'O', 'X')")
    hint_parser.add_argument("--mines", type=int, required=True, help="Mines restantes")
    hint_parser.add_argument("--solver", default=DEFAULT_SOLVER, help="Nom du solveur")

    bench_parser = subparsers.add_parser("bench", help="Banc d'essai d'un solveur")
    bench_parser.add_argument("--total", type=int, default=BENCHMARK_CONFIG['total'], help="Nombre de parties")
    bench_parser.add_argument("--size", default=BENCHMARK_CONFIG['size'], choices=SIZE_NAMES, help="Taille du plateau")
    bench_parser.add_argument("--solver", default=DEFAULT_SOLVER, help="Solveur évalué")
    bench_parser.add_argument("--generator", help="Solveur utilisé pour générer les parties")
    bench_parser.add_argument("--workers", type=int, default=BENCHMARK_CONFIG['workers'], help="Nombre de processus")
    bench_parser.add_argument("--seed", type=int, help="Graine de la première partie")
    bench_parser.add_argument("--log", action="store_true", help="Enregistrer la session (logs JSON)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "play":
        generator = get_solver(args.solver) if args.solver else None
        try:
            play(args.size, generator, get_solver(args.hint_solver), args.seed)
        except GenerationInterruptedError as e:
            print(f"[ERREUR] {e}")
            return 1
        return 0

    if args.command == "hint":
        solver = get_solver(args.solver)
        try:
            hint(args.file, args.mines, solver)
        except ValueError as e:
            print(f"[ERREUR] {e} (voir --mines)")
            return 1
        return 0

    logger = DebugLogger() if args.log else None
    service = BenchmarkService(
        ConventionalSize.from_name(args.size).size,
        get_solver(args.solver),
        generator=get_solver(args.generator) if args.generator else None,
        workers=args.workers,
        logger=logger,
        seed=args.seed,
    )
    report = service.run(args.total)
    if logger is not None:
        print(f"[BENCH] Session: {logger.save_session()}")
    print(f"[FIN] Taux de réussite: {report.success_rate:.1%}")
    return 0


def cli() -> None:
    """Point d'entrée console."""
    code = 1
    try:
        code = main()
    except KeyboardInterrupt:
        print("\nArrêt demandé par l'utilisateur.")
    except Exception as e:
        print(f"[ERREUR] Exception non capturée: {e}")
        import traceback
        traceback.print_exc()
    raise SystemExit(code)


if __name__ == "__main__":
    cli()
