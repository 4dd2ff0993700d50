from __future__ import annotations

import argparse
from typing import Optional, Sequence

from src.core.console import ConsoleSession
from src.core.round_engine import RoundEngine


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Sniper vs Goalkeeper card draw")
    parser.add_argument("--console", action="store_true",
                        help="play in the terminal instead of a window")
    parser.add_argument("--seed", type=int, default=None,
                        help="fixed shuffle seed, for repeatable games")
    parser.add_argument("--verbose", action="store_true",
                        help="print engine diagnostics")
    args = parser.parse_args(argv)

    if args.console:
        ConsoleSession(RoundEngine(seed=args.seed, verbose=args.verbose)).run()
        return

    # pygame is only imported for the window
    from src.ui.app import run
    run(seed=args.seed, verbose=args.verbose)


if __name__ == "__main__":
    main()
