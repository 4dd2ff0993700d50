import io
import random
import unittest
from contextlib import redirect_stdout

from src.core.card import CardEntry, CardKind, Role
from src.core.catalog import GOALKEEPER_CARDS, SNIPER_CARDS
from src.core.round_engine import Phase, RoundEngine


def _small_catalogs(n_sniper=3, n_keeper=3):
    return {
        Role.SNIPER:     [CardEntry(CardKind.BONUS, f"s{i}") for i in range(n_sniper)],
        Role.GOALKEEPER: [CardEntry(CardKind.PENALTY, f"g{i}") for i in range(n_keeper)],
    }


def _play_round(engine):
    engine.draw_for(Role.SNIPER)
    engine.draw_for(Role.GOALKEEPER)
    return engine.advance_round()


class TestStart(unittest.TestCase):
    def test_fresh_engine_is_not_started(self):
        engine = RoundEngine(seed=1)
        self.assertIs(engine.phase, Phase.NOT_STARTED)
        self.assertEqual(engine.remaining(Role.SNIPER), 0)
        self.assertIsNone(engine.sniper_pick)
        self.assertIsNone(engine.keeper_pick)

    def test_start_fills_decks_and_resets_round(self):
        engine = RoundEngine(seed=1)
        engine.start()
        self.assertIs(engine.phase, Phase.IN_PROGRESS)
        self.assertEqual(engine.round_number, 1)
        self.assertEqual(engine.remaining(Role.SNIPER), len(SNIPER_CARDS))
        self.assertEqual(engine.remaining(Role.GOALKEEPER), len(GOALKEEPER_CARDS))
        self.assertFalse(engine.both_picked())

    def test_max_rounds_defaults_to_smallest_catalog(self):
        self.assertEqual(RoundEngine().max_rounds, 9)
        self.assertEqual(RoundEngine(_small_catalogs(5, 4)).max_rounds, 4)

    def test_invalid_max_rounds_rejected(self):
        for bad in (0, 4, -1):
            with self.assertRaises(ValueError):
                RoundEngine(_small_catalogs(3, 3), max_rounds=bad)

    def test_shorter_game_allowed(self):
        engine = RoundEngine(max_rounds=2, seed=5)
        engine.start()
        self.assertTrue(_play_round(engine))
        self.assertTrue(_play_round(engine))
        self.assertIs(engine.phase, Phase.COMPLETED)
        self.assertEqual(engine.remaining(Role.SNIPER), 7)

    def test_catalog_query_returns_frozen_copy(self):
        cats = _small_catalogs()
        engine = RoundEngine(cats)
        cats[Role.SNIPER].clear()
        engine.start()
        self.assertEqual(engine.remaining(Role.SNIPER), 3)
        self.assertEqual(len(engine.catalog(Role.SNIPER)), 3)
        self.assertIsInstance(engine.catalog(Role.SNIPER), tuple)


class TestDrawFor(unittest.TestCase):
    def setUp(self):
        self.engine = RoundEngine(seed=42)
        self.engine.start()

    def test_draw_before_start_is_a_no_op(self):
        engine = RoundEngine(seed=1)
        self.assertIsNone(engine.draw_for(Role.SNIPER))
        self.assertIs(engine.phase, Phase.NOT_STARTED)

    def test_draw_records_pick_and_shrinks_deck(self):
        card = self.engine.draw_for(Role.SNIPER)
        self.assertIn(card, SNIPER_CARDS)
        self.assertEqual(self.engine.sniper_pick, card)
        self.assertEqual(self.engine.pick_for(Role.SNIPER), card)
        self.assertEqual(self.engine.remaining(Role.SNIPER), 8)
        self.assertEqual(self.engine.remaining(Role.GOALKEEPER), 9)
        self.assertIsNone(self.engine.keeper_pick)

    def test_second_draw_same_round_changes_nothing(self):
        first = self.engine.draw_for(Role.GOALKEEPER)
        deck_before = list(self.engine.snapshot().keeper_deck.cards)
        self.assertIsNone(self.engine.draw_for(Role.GOALKEEPER))
        self.assertEqual(self.engine.keeper_pick, first)
        self.assertEqual(self.engine.snapshot().keeper_deck.cards, deck_before)

    def test_draw_from_empty_deck_is_a_no_op(self):
        # the smaller sniper catalog runs dry exactly on the last round
        engine = RoundEngine(_small_catalogs(2, 3), seed=6)
        engine.start()
        _play_round(engine)
        _play_round(engine)
        self.assertEqual(engine.remaining(Role.SNIPER), 0)
        final = engine.sniper_pick

        self.assertIsNone(engine.draw_for(Role.SNIPER))
        self.assertEqual(engine.sniper_pick, final)
        self.assertEqual(engine.remaining(Role.SNIPER), 0)
        self.assertEqual(engine.remaining(Role.GOALKEEPER), 1)

    def test_snapshot_changes_do_not_reach_the_engine(self):
        self.engine.draw_for(Role.SNIPER)
        snap = self.engine.snapshot()
        snap.round.round_number = 0
        snap.round.sniper_pick = None
        snap.sniper_deck.cards.append(SNIPER_CARDS[0])
        snap.keeper_deck.cards.clear()
        self.assertEqual(self.engine.round_number, 1)
        self.assertIsNotNone(self.engine.sniper_pick)
        self.assertEqual(self.engine.remaining(Role.SNIPER), 8)
        self.assertEqual(self.engine.remaining(Role.GOALKEEPER), 9)

    def test_engine_has_no_live_state_handle(self):
        self.assertFalse(hasattr(self.engine, "state"))

    def test_draws_never_repeat_within_a_game(self):
        seen = []
        for _ in range(self.engine.max_rounds):
            seen.append(self.engine.draw_for(Role.SNIPER))
            self.engine.draw_for(Role.GOALKEEPER)
            self.engine.advance_round()
        self.assertEqual(len(set(seen)), len(SNIPER_CARDS))
        self.assertEqual(set(seen), set(SNIPER_CARDS))

    def test_deck_plus_picks_equals_catalog_size(self):
        picks = 0
        for _ in range(self.engine.max_rounds):
            self.engine.draw_for(Role.SNIPER)
            picks += 1
            self.assertEqual(self.engine.remaining(Role.SNIPER) + picks, len(SNIPER_CARDS))
            self.engine.draw_for(Role.GOALKEEPER)
            self.engine.advance_round()


class TestAdvanceRound(unittest.TestCase):
    def setUp(self):
        self.engine = RoundEngine(seed=9)
        self.engine.start()

    def test_advance_needs_both_picks(self):
        self.assertFalse(self.engine.advance_round())
        self.engine.draw_for(Role.SNIPER)
        self.assertFalse(self.engine.advance_round())
        self.assertEqual(self.engine.round_number, 1)
        self.assertIsNotNone(self.engine.sniper_pick)

    def test_advance_before_start_is_a_no_op(self):
        engine = RoundEngine()
        self.assertFalse(engine.advance_round())
        self.assertEqual(engine.round_number, 1)

    def test_advance_clears_picks_and_increments(self):
        self.assertTrue(_play_round(self.engine))
        self.assertEqual(self.engine.round_number, 2)
        self.assertIsNone(self.engine.sniper_pick)
        self.assertIsNone(self.engine.keeper_pick)

    def test_full_game_scenario(self):
        card = self.engine.draw_for(Role.SNIPER)
        self.assertIn(card, SNIPER_CARDS)
        self.assertEqual(self.engine.remaining(Role.SNIPER), 8)
        self.engine.draw_for(Role.GOALKEEPER)
        self.assertEqual(self.engine.remaining(Role.GOALKEEPER), 8)
        self.assertTrue(self.engine.advance_round())
        self.assertEqual(self.engine.round_number, 2)
        self.assertFalse(self.engine.both_picked())

        for _ in range(7):
            self.assertTrue(_play_round(self.engine))
        self.assertEqual(self.engine.round_number, 9)
        self.assertTrue(self.engine.is_last_round())
        self.assertIs(self.engine.phase, Phase.IN_PROGRESS)

        self.assertTrue(_play_round(self.engine))
        self.assertIs(self.engine.phase, Phase.COMPLETED)
        self.assertEqual(self.engine.round_number, 9)
        self.assertEqual(self.engine.remaining(Role.SNIPER), 0)
        self.assertEqual(self.engine.remaining(Role.GOALKEEPER), 0)
        # final picks stay visible
        self.assertTrue(self.engine.both_picked())

    def test_completed_is_terminal(self):
        for _ in range(self.engine.max_rounds):
            _play_round(self.engine)
        final = (self.engine.sniper_pick, self.engine.keeper_pick)
        self.assertFalse(self.engine.advance_round())
        self.assertIsNone(self.engine.draw_for(Role.SNIPER))
        self.assertEqual(self.engine.round_number, 9)
        self.assertEqual((self.engine.sniper_pick, self.engine.keeper_pick), final)

    def test_round_number_never_decreases(self):
        last = self.engine.round_number
        for _ in range(self.engine.max_rounds + 3):
            _play_round(self.engine)
            self.assertGreaterEqual(self.engine.round_number, last)
            last = self.engine.round_number


class TestRestart(unittest.TestCase):
    def test_second_start_fully_resets(self):
        engine = RoundEngine(seed=3)
        engine.start()
        for _ in range(4):
            _play_round(engine)
        engine.draw_for(Role.SNIPER)

        engine.start()
        self.assertIs(engine.phase, Phase.IN_PROGRESS)
        self.assertEqual(engine.round_number, 1)
        self.assertIsNone(engine.sniper_pick)
        self.assertEqual(set(engine.snapshot().sniper_deck.cards), set(SNIPER_CARDS))
        self.assertEqual(set(engine.snapshot().keeper_deck.cards), set(GOALKEEPER_CARDS))

    def test_restart_after_completion(self):
        engine = RoundEngine(_small_catalogs(), seed=3)
        engine.start()
        for _ in range(3):
            _play_round(engine)
        self.assertIs(engine.phase, Phase.COMPLETED)
        engine.start()
        self.assertIs(engine.phase, Phase.IN_PROGRESS)
        self.assertEqual(engine.remaining(Role.GOALKEEPER), 3)

    def test_injected_rng_is_used(self):
        a = RoundEngine(rng=random.Random(21))
        b = RoundEngine(rng=random.Random(21))
        a.start()
        b.start()
        self.assertEqual(a.snapshot().sniper_deck.cards, b.snapshot().sniper_deck.cards)
        self.assertEqual(a.draw_for(Role.GOALKEEPER), b.draw_for(Role.GOALKEEPER))


class TestVerbose(unittest.TestCase):
    def test_quiet_by_default(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            engine = RoundEngine(seed=1)
            engine.start()
            _play_round(engine)
        self.assertEqual(buf.getvalue(), "")

    def test_verbose_prints_engine_lines(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            engine = RoundEngine(seed=1, verbose=True)
            engine.start()
            engine.draw_for(Role.SNIPER)
        lines = buf.getvalue().splitlines()
        self.assertTrue(lines)
        self.assertTrue(all(line.startswith("[engine]") for line in lines))
        self.assertIn("sniper drew", lines[-1])


if __name__ == "__main__":
    unittest.main()
