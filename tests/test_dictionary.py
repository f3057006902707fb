#!/usr/bin/env python3

import unittest

from wordrush.core.dictionary import Lexicon, load_lexicon


class TestLexicon(unittest.TestCase):
    def test_from_words_normalizes(self):
        lexicon = Lexicon.from_words(["  KALEM ", "Kâğıt", "IŞIK", "İNCİR", "ev", "kalem"])
        self.assertEqual(["kalem", "kağıt", "ışık", "incir"], lexicon.words())
        self.assertTrue(lexicon.is_word("kağıt"))
        self.assertIn("ışık", lexicon)
        self.assertNotIn("ev", lexicon)
        self.assertEqual(4, len(lexicon))

    def test_short_words_dropped(self):
        lexicon = Lexicon.from_words(["ada", "adam", "a", ""])
        self.assertEqual(["adam"], list(lexicon))

    def test_load_lexicon_from_text(self):
        lexicon = load_lexicon("kitap\r\ndefter\n\nkalem")
        self.assertEqual(["kitap", "defter", "kalem"], lexicon.words())

    def test_load_lexicon_without_text_falls_back(self):
        lexicon = load_lexicon(None)
        self.assertTrue(lexicon.used_fallback)
        self.assertIn("oyun", lexicon)

    def test_load_lexicon_with_no_usable_words_falls_back(self):
        lexicon = load_lexicon("ev\nsu\n")
        self.assertTrue(lexicon.used_fallback)
        self.assertIn("deneme", lexicon)


if __name__ == '__main__':
    unittest.main()
