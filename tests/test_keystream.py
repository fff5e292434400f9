"""Tests for the keystream generator."""

import pytest
from vigenere.cipher_api import INERT, InvalidKey
from vigenere.keystream import generate_keystream


class TestGenerateKeystream:
    """Test cases for generate_keystream."""

    def test_key_cycles_over_letters_only(self):
        """Spaces do not advance the key index."""
        assert generate_keystream("HELLO WORLD", "KEY") == "KEYKE YKEYK"

    def test_alphabetic_positions_follow_key(self):
        ks = generate_keystream("HELLO WORLD", "KEY")
        letters = [k for k in ks if k != INERT]
        assert letters == list("KEYKEYKEYK")

    def test_inert_at_every_non_letter(self):
        message = "a1, b-c!"
        ks = generate_keystream(message, "xy")
        for m, k in zip(message, ks):
            if m.isalpha():
                assert k in "XY"
            else:
                assert k == INERT

    def test_mixed_punctuation_exact(self):
        assert generate_keystream("a1, b-c!", "xy") == "X   Y X "

    def test_length_matches_message(self):
        for message in ["", "A", "AB CD", "...", "x" * 50]:
            assert len(generate_keystream(message, "KEY")) == len(message)

    def test_key_is_uppercased(self):
        assert generate_keystream("abcd", "key") == "KEYK"

    def test_key_longer_than_message(self):
        assert generate_keystream("HI", "LONGKEY") == "LO"

    def test_empty_message(self):
        assert generate_keystream("", "KEY") == ""

    def test_empty_key_rejected(self):
        with pytest.raises(InvalidKey):
            generate_keystream("HELLO", "")

    def test_empty_key_rejected_even_for_empty_message(self):
        with pytest.raises(InvalidKey):
            generate_keystream("", "")

    def test_non_ascii_letters_are_inert(self):
        assert generate_keystream("é a", "K") == "  K"
