"""Tests for the deal and simulate command-line helpers."""

import random
import sys

import numpy as np
import pytest
from rich.table import Table

from poker_hands.engine import DeckExhaustedError, Hand, compare
from poker_hands.rules import HandCategory, make_cards_from_string
from poker_hands.scripts.deal import DealConfig, deal_hands, rank_hands, build_table
from poker_hands.scripts.simulate import SimulationConfig, simulate
from poker_hands.scripts import deal as deal_script
from poker_hands.scripts import simulate as simulate_script


def hand(text: str) -> Hand:
    return Hand.from_cards(make_cards_from_string(text))


class TestDeal:
    """Tests for dealing and ranking hands."""

    def test_deal_hands(self):
        hands = deal_hands(DealConfig(players=6, seed=3))
        assert len(hands) == 6
        dealt = [c for h in hands for c in h.cards]
        assert len(set(dealt)) == 30

    def test_seeded_deal_is_reproducible(self):
        first = deal_hands(DealConfig(players=4, seed=11))
        second = deal_hands(DealConfig(players=4, seed=11))
        assert [h.cards for h in first] == [h.cards for h in second]

    def test_too_many_players(self):
        with pytest.raises(DeckExhaustedError):
            deal_hands(DealConfig(players=11))

    def test_rank_hands_orders_best_first(self):
        hands = [hand("AC KD 5H 3S 2C"), hand("9C 9D 9H 9S 2D"), hand("QC QD 2H 8S 5C")]
        ranked = rank_hands(hands)
        assert [index for _, index, _ in ranked] == [1, 2, 0]
        assert [place for place, _, _ in ranked] == [1, 2, 3]

    def test_rank_hands_shares_place_on_tie(self):
        hands = [hand("7C 7D KH 4S 2C"), hand("AC AD 5H 3S 2H"), hand("7H 7S KD 4C 2D")]
        ranked = rank_hands(hands)
        assert [place for place, _, _ in ranked] == [1, 2, 2]
        assert compare(ranked[1][2], ranked[2][2]) == 0

    def test_build_table(self):
        table = build_table(rank_hands([hand("AC KD 5H 3S 2C")]))
        assert isinstance(table, Table)
        assert table.row_count == 1


class TestSimulate:
    """Tests for the category frequency simulation."""

    def test_counts_sum_to_hands(self):
        counts = simulate(SimulationConfig(hands=500, seed=5))
        assert counts.shape == (len(HandCategory),)
        assert int(counts.sum()) == 500

    def test_reshuffles_when_deck_runs_low(self):
        counts = simulate(SimulationConfig(hands=40, seed=1))
        assert int(counts.sum()) == 40

    def test_seeded_simulation_is_reproducible(self):
        a = simulate(SimulationConfig(hands=200, seed=42))
        b = simulate(SimulationConfig(hands=200, seed=42))
        assert np.array_equal(a, b)

    def test_high_card_and_pair_dominate(self):
        counts = simulate(SimulationConfig(hands=2000, seed=8))
        assert counts[HandCategory.HIGH_CARD] + counts[HandCategory.PAIR] > 1500

    def test_build_table(self):
        counts = np.zeros(len(HandCategory), dtype=np.int64)
        counts[HandCategory.PAIR] = 3
        table = simulate_script.build_table(counts)
        assert table.row_count == len(HandCategory)

    def test_simulate_leaves_global_rngs_alone(self):
        random.seed(123)
        np.random.seed(123)
        py_state = random.getstate()
        np_state = np.random.get_state()[1].copy()

        simulate(SimulationConfig(hands=50, seed=5))

        assert random.getstate() == py_state
        assert np.array_equal(np.random.get_state()[1], np_state)

    def test_unseeded_simulation(self):
        counts = simulate(SimulationConfig(hands=30))
        assert int(counts.sum()) == 30


class TestMain:
    """Tests for the script entry points: exit codes and error stream."""

    def test_deal_main_prints_table(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["deal", "--players", "3", "--seed", "4"])
        deal_script.main()
        captured = capsys.readouterr()
        assert "Showdown" in captured.out
        assert captured.err == ""

    def test_deal_main_bad_size_exits_with_error_on_stderr(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["deal", "--size", "20"])
        with pytest.raises(SystemExit) as excinfo:
            deal_script.main()
        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        assert "Error: Hand size must be an integer in 1..13, got 20" in captured.err
        assert "Error" not in captured.out

    def test_deal_main_too_many_players_exits(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["deal", "--players", "11"])
        with pytest.raises(SystemExit) as excinfo:
            deal_script.main()
        assert excinfo.value.code == 1
        assert "Cannot draw 5 cards" in capsys.readouterr().err

    def test_simulate_main_prints_table(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["simulate", "--hands", "20", "--seed", "2"])
        simulate_script.main()
        captured = capsys.readouterr()
        assert "Category frequencies over 20 hands" in captured.out
        assert captured.err == ""

    def test_simulate_main_zero_hands_exits_with_error_on_stderr(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["simulate", "--hands", "0"])
        with pytest.raises(SystemExit) as excinfo:
            simulate_script.main()
        assert excinfo.value.code == 1
        captured = capsys.readouterr()
        assert "Error: --hands must be positive" in captured.err
        assert captured.out == ""

    def test_simulate_main_bad_size_exits_with_error_on_stderr(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["simulate", "--hands", "5", "--size", "20"])
        with pytest.raises(SystemExit) as excinfo:
            simulate_script.main()
        assert excinfo.value.code == 1
        assert "Hand size must be an integer" in capsys.readouterr().err
