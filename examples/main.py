# examples/main.py
from __future__ import annotations

import argparse
import logging
import sys

from cg2d.benchmark import time_millis
from cg2d.hull import validate_hull
from cg2d.io import load_points, uniform_random
from cg2d.pipeline import ALGORITHMS, get_algorithm


def build_parser() -> argparse.ArgumentParser:
    """
    Два режими:
      visual: вікно з анімацією (examples/gui.py),
      perf:   заміри часу для вибраного алгоритму (або всіх).
    """
    parser = argparse.ArgumentParser(description="2D convex hull: Andrew monotone chain / Jarvis gift wrapping")
    parser.add_argument("--mode", choices=["visual", "perf"], default="visual")
    parser.add_argument("--algo", choices=sorted(ALGORITHMS) + ["all"], default="andrew")
    parser.add_argument("--file", default=None, help="файл: перший рядок n, далі n рядків 'x,y'")
    parser.add_argument("--n", type=int, default=200, help="кількість випадкових точок (якщо нема --file)")
    parser.add_argument("--seed", type=int, default=1234)
    parser.add_argument("--delay", type=float, default=0.08, help="пауза між кроками анімації, с")
    parser.add_argument("--verbose", action="store_true", help="DEBUG-логи бібліотеки")
    return parser


def time_once(name: str, points) -> None:
    algo = get_algorithm(name)
    ms = time_millis(algo, points)
    hull = algo.compute_convex_hull(points)
    report = validate_hull(hull, points)
    ok = not (report["reflex_turns"] or report["collinear_vertices"] or report["outside_points"])
    print(f"Algorithm: {name} | n={len(points)} | time={ms:.3f} ms | hull={len(hull)} | valid={ok}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # --- 1) Точки: з файлу або випадкові ---
    if args.file:
        points = load_points(args.file)
    else:
        points = uniform_random(args.n, 1, 10, 1, 10, seed=args.seed)

    # --- 2) Режим ---
    if args.mode == "perf":
        names = sorted(ALGORITHMS) if args.algo == "all" else [args.algo]
        for name in names:
            time_once(name, points)
        return 0

    # візуальний режим тягне tkinter/matplotlib лише тут
    from gui import HullApp

    algo = "andrew" if args.algo == "all" else args.algo
    app = HullApp(points=points, algorithm=algo, delay=args.delay)
    app.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
