"""
Elevens core Python package.

Card, deck and board machinery plus the Elevens rule evaluator, kept free of
any I/O so the Flask app, the CLI and the tests can share them.
Modules:
- card.py: Card, Rank, Suit
- deck.py: Deck
- board.py: Board, RuleEvaluator, InvariantError
- rules.py: ElevensRules
- deal.py: deal_elevens_board
- moves.py: available_moves, hint, apply_selection, game_phase
- ai.py: pick_move, play_out
"""
