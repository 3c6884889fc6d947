from __future__ import annotations

import argparse
import logging
import os
import random
from typing import List, Optional

from .ai import play_out
from .deal import deal_elevens_board

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Elevens solitaire: deal seeded games and play them out')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the first deal')
    parser.add_argument('--games', type=int, default=1, help='Number of games to play out')
    parser.add_argument('--random-moves', action='store_true', help='Pick a random legal move instead of the hint')
    parser.add_argument('--show', action='store_true', help='Print the opening board of each game')
    parser.add_argument('--log-level', default=os.getenv('ELEVENS_LOG_LEVEL', 'WARNING'), help='Logging level')
    args = parser.parse_args(argv)

    level = args.log_level.upper()
    if level not in LOG_LEVELS:
        parser.error(f'--log-level must be one of {", ".join(LOG_LEVELS)}')

    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    if args.games < 1:
        parser.error('--games must be at least 1')

    wins = 0
    for n in range(args.games):
        seed = None if args.seed is None else args.seed + n
        board = deal_elevens_board(seed=seed)
        if args.show:
            print(f'Game {n + 1} opening board:')
            print(board.pretty())
        move_rng = random.Random(seed) if args.random_moves else None
        result = play_out(board, rng=move_rng)
        wins += 1 if result.won else 0
        outcome = 'won' if result.won else f'stuck with {result.cards_left} cards left'
        print(f'Game {n + 1}: {outcome} after {len(result.moves)} moves')

    print(f'Won {wins} of {args.games} ({100.0 * wins / args.games:.1f}%)')
