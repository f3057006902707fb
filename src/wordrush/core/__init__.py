"""Alphabet, letter generation, lexicon, solving, and scoring."""
