import random
import unittest

from game import (
    BOARD_SIZE,
    Board,
    Card,
    ElevensRules,
    GamePhase,
    IllegalSelection,
    Rank,
    Suit,
    apply_selection,
    available_moves,
    deal_elevens_board,
    game_phase,
    hint,
    pick_move,
    play_out,
)


def make_board(slots, deck=()):
    padded = list(slots) + [None] * (BOARD_SIZE - len(slots))
    return Board.restore(ElevensRules(), padded, list(deck))


def c(rank, suit=Suit.CLUBS):
    return Card(rank, suit, face_up=True)


class _OneAtATimeRules:
    """Any single occupied slot may be removed."""

    def is_legal(self, board, selection):
        return len(selection) == 1 and board.card_at(selection[0]) is not None

    def another_play_is_possible(self, board):
        return bool(board.occupied())

    def available_moves(self, board):
        return [(i,) for i, _ in board.occupied()]


class TestMovesAndHints(unittest.TestCase):
    def test_given_pairs_and_faces_when_listing_moves_then_pairs_come_first(self):
        board = make_board([c(Rank.JACK), c(Rank.QUEEN), c(Rank.KING), c(Rank.FOUR), c(Rank.SEVEN)])
        self.assertEqual(available_moves(board), [(3, 4), (0, 1, 2)])
        self.assertEqual(hint(board), (3, 4))

    def test_given_only_faces_when_hinting_then_triplet(self):
        board = make_board([c(Rank.KING), c(Rank.QUEEN), c(Rank.JACK)])
        self.assertEqual(hint(board), (2, 1, 0))

    def test_given_stuck_board_when_hinting_then_none(self):
        board = make_board([c(Rank.TWO), c(Rank.THREE)], [c(Rank.NINE, Suit.HEARTS)])
        self.assertIsNone(hint(board))
        self.assertEqual(game_phase(board), GamePhase.LOST)

    def test_given_legal_selection_when_applying_then_replaced_count_returned(self):
        deck = [c(Rank.TWO, Suit.HEARTS), c(Rank.THREE, Suit.HEARTS), c(Rank.FOUR, Suit.HEARTS)]
        board = make_board([c(Rank.ACE), c(Rank.TEN)], deck)
        self.assertEqual(apply_selection(board, [0, 1]), 2)
        self.assertEqual(board.deck_size(), 1)
        self.assertTrue(board.card_at(0).face_up)
        self.assertTrue(board.card_at(1).face_up)

    def test_given_illegal_selection_when_applying_then_raises_and_board_untouched(self):
        board = make_board([c(Rank.ACE), c(Rank.NINE)], [c(Rank.TWO, Suit.HEARTS)])
        with self.assertRaises(IllegalSelection) as ctx:
            apply_selection(board, [0, 1])
        self.assertEqual(ctx.exception.selection, [0, 1])
        self.assertIsInstance(ctx.exception, ValueError)
        self.assertEqual(board.card_at(0), c(Rank.ACE))
        self.assertEqual(board.deck_size(), 1)

    def test_given_boards_when_classifying_then_three_phases(self):
        self.assertEqual(game_phase(make_board([])), GamePhase.WON)
        self.assertEqual(game_phase(make_board([c(Rank.ACE), c(Rank.TEN)])), GamePhase.IN_PROGRESS)
        self.assertEqual(game_phase(make_board([c(Rank.ACE)])), GamePhase.LOST)

    def test_given_other_rules_when_hinting_and_playing_out_then_evaluator_moves_used(self):
        board = Board.restore(_OneAtATimeRules(), [c(Rank.KING), None, c(Rank.TWO)], [c(Rank.FIVE, Suit.HEARTS)])
        self.assertEqual(available_moves(board), [(0,), (2,)])
        self.assertEqual(hint(board), (0,))
        result = play_out(board)
        self.assertTrue(result.won)
        self.assertEqual(len(result.moves), 3)


class TestAutoplay(unittest.TestCase):
    def test_given_last_pair_when_playing_out_then_won(self):
        board = make_board([c(Rank.FIVE), None, c(Rank.SIX)])
        result = play_out(board)
        self.assertTrue(result.won)
        self.assertEqual(result.moves, [(0, 2)])
        self.assertEqual(result.cards_left, 0)

    def test_given_stuck_board_when_playing_out_then_lost_without_moves(self):
        board = make_board([c(Rank.TWO), c(Rank.TWO, Suit.HEARTS)], [c(Rank.KING)])
        result = play_out(board)
        self.assertFalse(result.won)
        self.assertEqual(result.moves, [])
        self.assertEqual(result.cards_left, 3)

    def test_given_seeded_games_when_playing_out_then_cards_accounted_for(self):
        for seed in range(20):
            board = deal_elevens_board(seed=seed)
            result = play_out(board, rng=random.Random(seed))
            removed = sum(len(m) for m in result.moves)
            self.assertEqual(removed + result.cards_left, 52)
            self.assertEqual(result.won, board.game_is_won())
            self.assertNotEqual(game_phase(board), GamePhase.IN_PROGRESS)
            board.check_invariants()

    def test_given_same_seed_when_playing_out_then_same_moves(self):
        r1 = play_out(deal_elevens_board(seed=11), rng=random.Random(4))
        r2 = play_out(deal_elevens_board(seed=11), rng=random.Random(4))
        self.assertEqual(r1.moves, r2.moves)

    def test_given_stuck_board_when_picking_then_none(self):
        board = make_board([c(Rank.TWO)])
        self.assertIsNone(pick_move(board))
        self.assertIsNone(pick_move(board, random.Random(0)))

    def test_given_rng_when_picking_then_choice_among_available(self):
        board = make_board([c(Rank.ACE), c(Rank.TEN), c(Rank.FIVE), c(Rank.SIX)])
        picks = {pick_move(board, random.Random(s)) for s in range(30)}
        self.assertTrue(picks <= {(0, 1), (2, 3)})
        self.assertEqual(pick_move(board), (0, 1))


if __name__ == '__main__':
    unittest.main(verbosity=2)
