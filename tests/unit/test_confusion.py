"""
Tests for the character confusion table.
"""

import pytest

from phonetrack.confusion import (
    ALLOWED_CHARACTERS,
    CONFUSION_TABLE,
    resolve_character,
)


class TestConfusionTable:
    """Tests for the fixed confusion table."""

    def test_table_entries(self):
        """The table holds exactly the known look-alike pairs."""
        assert dict(CONFUSION_TABLE) == {
            "s": "S",
            "S": "5",
            "5": "S",
            "o": "O",
            "Q": "O",
            "O": "0",
            "0": "O",
            "l": "I",
            "I": "1",
            "1": "I",
            "B": "8",
            "8": "B",
        }

    def test_table_is_directional(self):
        """s maps to S, but S does not map back to s."""
        assert CONFUSION_TABLE["s"] == "S"
        assert CONFUSION_TABLE["S"] != "s"
        assert CONFUSION_TABLE["Q"] == "O"
        assert CONFUSION_TABLE["O"] != "Q"

    def test_table_is_read_only(self):
        """The table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            CONFUSION_TABLE["x"] = "X"  # type: ignore[index]

    def test_allowed_alphabet(self):
        """Digits plus ( ) - _ are allowed."""
        assert set("0123456789()-_") == ALLOWED_CHARACTERS


class TestResolveCharacter:
    """Tests for resolve_character()."""

    @pytest.mark.parametrize("char", list("0123456789()-_"))
    def test_allowed_characters_untouched(self, char):
        """Characters already allowed are returned as-is."""
        assert resolve_character(char) == char

    @pytest.mark.parametrize(
        "char,expected",
        [
            ("S", "5"),
            ("O", "0"),
            ("I", "1"),
            ("B", "8"),
        ],
    )
    def test_single_hop(self, char, expected):
        """One lookup is enough for upper-case look-alikes."""
        assert resolve_character(char) == expected

    @pytest.mark.parametrize(
        "char,expected",
        [
            ("s", "5"),  # s -> S -> 5
            ("o", "0"),  # o -> O -> 0
            ("Q", "0"),  # Q -> O -> 0
            ("l", "1"),  # l -> I -> 1
        ],
    )
    def test_two_hops(self, char, expected):
        """Lower-case look-alikes need two lookups."""
        assert resolve_character(char) == expected

    def test_unknown_character_unresolved(self):
        """Characters without a table entry come back unchanged."""
        assert resolve_character("x") == "x"
        assert resolve_character("Z") == "Z"

    def test_hop_limit(self):
        """The hop limit stops the chain early."""
        assert resolve_character("s", max_substitutions=1) == "S"
        assert resolve_character("S", max_substitutions=0) == "S"

    def test_custom_alphabet(self):
        """Resolution works towards any allowed set."""
        assert resolve_character("5", allowed=frozenset("S")) == "S"
        assert resolve_character("0", allowed=frozenset("O")) == "O"
