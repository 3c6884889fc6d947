from __future__ import annotations

import random
from typing import Optional

from .board import Board
from .rules import BOARD_SIZE, ElevensRules


def deal_elevens_board(seed: Optional[int] = None) -> Board:
    """Creates a 9-slot Elevens board and deals the opening layout from a shuffled deck."""
    board = Board(BOARD_SIZE, ElevensRules(), rng=random.Random(seed))
    board.new_game()
    return board
