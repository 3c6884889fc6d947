from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board
from .moves import GamePhase, Move, apply_selection, available_moves, game_phase

logger = logging.getLogger(__name__)


@dataclass
class PlayOutResult:
    won: bool
    moves: List[Move] = field(default_factory=list)
    cards_left: int = 0


def pick_move(board: Board, rng: Optional[random.Random] = None) -> Optional[Move]:
    """Picks the hint move, or a uniformly random available move when an rng is supplied."""
    moves = available_moves(board)
    if not moves:
        return None
    if rng is None:
        return moves[0]
    return rng.choice(moves)


def play_out(board: Board, rng: Optional[random.Random] = None) -> PlayOutResult:
    """Plays picked moves until the board is won or stuck."""
    played: List[Move] = []
    while game_phase(board) is GamePhase.IN_PROGRESS:
        move = pick_move(board, rng)
        if move is None:
            break
        apply_selection(board, move)
        played.append(move)
    won = board.game_is_won()
    cards_left = len(board.occupied()) + board.deck_size()
    logger.debug("play out finished: won=%s after %d moves, %d cards left", won, len(played), cards_left)
    return PlayOutResult(won=won, moves=played, cards_left=cards_left)
