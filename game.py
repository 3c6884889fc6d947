from __future__ import annotations

# Facade module that re-exports Elevens core functionality.
# Used by the Flask app and tests; single-responsibility modules live under elevens_core/*.

from elevens_core.card import FACE_RANKS, Card, Rank, Suit, full_set
from elevens_core.deck import Deck
from elevens_core.board import FULL_SET_SIZE, Board, InvariantError, RuleEvaluator
from elevens_core.rules import BOARD_SIZE, PAIR_TOTAL, ElevensRules
from elevens_core.deal import deal_elevens_board
from elevens_core.moves import (
    GamePhase,
    IllegalSelection,
    Move,
    apply_selection,
    available_moves,
    game_phase,
    hint,
)
from elevens_core.ai import PlayOutResult, pick_move, play_out

__all__ = [
    'FACE_RANKS', 'Card', 'Rank', 'Suit', 'full_set',
    'Deck',
    'FULL_SET_SIZE', 'Board', 'InvariantError', 'RuleEvaluator',
    'BOARD_SIZE', 'PAIR_TOTAL', 'ElevensRules',
    'deal_elevens_board',
    'GamePhase', 'IllegalSelection', 'Move', 'apply_selection', 'available_moves', 'game_phase', 'hint',
    'PlayOutResult', 'pick_move', 'play_out',
    'main',
]


def main() -> None:
    # CLI driver delegated to elevens_core.cli
    from elevens_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
