#!/usr/bin/env python3

import unittest

from wordrush.core.scorecard import Play, ScoreCard
from wordrush.core.solver import RoundSolution, solve
from tests.fixtures.dictionary_helpers import SCENARIO_BAG, SCENARIO_DICT, create_test_lexicon


class TestScoreCard(unittest.TestCase):
    def setUp(self):
        solution = solve(SCENARIO_BAG, create_test_lexicon(SCENARIO_DICT))
        self.score_card = ScoreCard(solution)

    def test_score(self):
        self.assertEqual((40, False), self.score_card.calculate_score("kale"))
        self.assertEqual((50, False), self.score_card.calculate_score("sinek"))

    def test_longest_word_doubles(self):
        self.assertEqual((160, True), self.score_card.calculate_score("kurtlane"))

    def test_calculate_score_is_pure(self):
        self.score_card.calculate_score("kurtlane")
        self.score_card.calculate_score("kurtlane")
        self.assertEqual(set(), self.score_card.longest_words_found)

    def test_judge(self):
        self.assertEqual(Play.BAD_WORD, self.score_card.judge("kitap"))
        self.assertEqual(Play.GOOD, self.score_card.judge("kale"))
        self.score_card.accept("kale")
        self.assertEqual(Play.DUPE_WORD, self.score_card.judge("kale"))

    def test_accept_registers_bonus_once(self):
        self.assertEqual((160, True), self.score_card.accept("kurtlane"))
        self.assertEqual({"kurtlane"}, self.score_card.longest_words_found)
        self.assertEqual(["kurtlane"], self.score_card.get_found_words())
        with self.assertRaises(ValueError):
            self.score_card.accept("kurtlane")
        self.assertEqual(["kurtlane"], self.score_card.get_found_words())

    def test_second_distinct_longest_word_also_bonus(self):
        self.score_card.accept("kurtlane")
        self.assertEqual((160, True), self.score_card.accept("turnakel"))
        self.assertEqual({"kurtlane", "turnakel"}, self.score_card.longest_words_found)

    def test_bonus_subset_of_found(self):
        for word in ["ekin", "turnakel", "sert"]:
            self.score_card.accept(word)
        self.assertTrue(self.score_card.longest_words_found <= set(self.score_card.found_words))

    def test_accept_bad_word_raises(self):
        with self.assertRaises(ValueError):
            self.score_card.accept("kitap")
        self.assertEqual([], self.score_card.found_words)

    def test_register_bonus_rejects_short_word(self):
        with self.assertRaises(ValueError):
            self.score_card.register_bonus("kale")

    def test_empty_solution_never_bonus(self):
        score_card = ScoreCard(RoundSolution((), 0))
        self.assertEqual((0, False), score_card.calculate_score(""))
        self.assertFalse(score_card.is_bonus_word("kale"))


if __name__ == '__main__':
    unittest.main()
