"""
Unit tests for password generation functionality.
"""

import pytest

from passforge import CHAR_RANGES, CharCategory, GenerationOptions, generate
from passforge.exceptions import InvalidLengthError, NoEligibleCategoriesError
from passforge.generators.password import PasswordGenerator


UPPER = set(CHAR_RANGES[CharCategory.UPPER])
LOWER = set(CHAR_RANGES[CharCategory.LOWER])
DIGITS = set(CHAR_RANGES[CharCategory.DIGITS])


class TestGenerate:
    """Test the generate entry point."""

    def test_exact_length(self):
        """Test generated passwords have the requested length."""
        for length in [0, 1, 4, 8, 16, 32, 64, 128]:
            password = generate({"length": length, "upper": True, "lower": True, "digits": True})
            assert len(password) == length

    def test_invalid_lengths(self):
        """Test invalid lengths give an empty password."""
        for length in [-1, -100, -2.0, 8.5, float("nan"), None, "8", True]:
            assert generate({"length": length, "upper": True}) == ""

    def test_whole_float_length(self):
        """Test a whole-number float length is accepted."""
        password = generate({"length": 8.0, "upper": True})
        assert len(password) == 8
        assert set(password) <= UPPER

        assert generate({"length": 0.0, "upper": True}) == ""
        assert len(generate({"length": 6.0, "name": "Pronounceable"})) == 6

    def test_malformed_options(self):
        """Test malformed options give an empty password."""
        assert generate(None) == ""
        assert generate("length=8") == ""
        assert generate({"length": 8, "upper": True, "pattern": 5}) == ""

    def test_missing_length(self):
        """Test options without a length give an empty password."""
        assert generate({"upper": True}) == ""

    def test_no_categories(self):
        """Test no categories and no include set give an empty password."""
        assert generate({"length": 10}) == ""
        assert generate({"length": 10, "include": ""}) == ""
        assert generate(GenerationOptions(length=10, pattern="A-X")) == ""

    def test_include_only(self):
        """Test include set alone is enough to generate."""
        password = generate({"length": 20, "include": "xyz"})
        assert len(password) == 20
        assert set(password) <= set("xyz")

    def test_single_category(self):
        """Test only characters of the chosen category are used."""
        password = generate({"length": 50, "digits": True})
        assert set(password) <= DIGITS

    def test_default_pattern_coverage(self):
        """Test every enabled category appears when length allows."""
        categories = list(CharCategory)
        for _ in range(50):
            options = GenerationOptions(length=len(categories), categories=frozenset(categories))
            password = generate(options)
            for category in categories:
                assert set(password) & set(CHAR_RANGES[category]), category

    def test_coverage_over_many_trials(self):
        """Test upper and digits always appear and no character is excluded."""
        seen = set()
        for _ in range(2000):
            password = generate({"length": 8, "upper": True, "digits": True, "pattern": "X"})
            assert len(password) == 8
            assert set(password) & UPPER
            assert set(password) & DIGITS
            assert set(password) <= UPPER | DIGITS
            seen.update(password)

        assert seen == UPPER | DIGITS

    def test_literal_pattern_positions(self):
        """Test literal mask characters are copied unchanged."""
        for _ in range(20):
            password = generate({"length": 5, "pattern": "X-X-X", "lower": True, "special": True})
            assert password[1] == "-"
            assert password[3] == "-"

    def test_pattern_cycles(self):
        """Test the mask repeats over the requested length."""
        password = generate({"length": 7, "pattern": "A1", "lower": True})
        assert len(password) == 7
        for i, ch in enumerate(password):
            assert ch in (UPPER if i % 2 == 0 else DIGITS)

    def test_category_pattern_characters(self):
        """Test each mask character draws from its category."""
        options = {"length": 7, "pattern": "Aa1*[Ä0", "lower": True}
        password = generate(options)
        expected = [
            CharCategory.UPPER, CharCategory.LOWER, CharCategory.DIGITS,
            CharCategory.SPECIAL, CharCategory.BRACKETS, CharCategory.HIGH,
            CharCategory.AMBIGUOUS,
        ]
        for ch, category in zip(password, expected):
            assert ch in CHAR_RANGES[category]

    def test_include_pattern_character(self):
        """Test the include mask character draws from the include set."""
        password = generate({"length": 12, "pattern": "I", "include": "#$"})
        assert set(password) <= set("#$")

    def test_include_pattern_without_include_set(self):
        """Test the include mask character is literal when no include set is given."""
        password = generate({"length": 4, "pattern": "IX", "upper": True})
        assert password[0] == "I"
        assert password[2] == "I"
        assert password[1] in UPPER

    def test_pronounceable(self):
        """Test pronounceable mode returns alphabetic text of the right length."""
        password = generate({"length": 10, "name": "Pronounceable"})
        assert len(password) == 10
        assert password.isalpha()
        assert password.islower()

    def test_pronounceable_invalid_length(self):
        """Test pronounceable mode honors length validation."""
        assert generate({"length": -3, "name": "Pronounceable"}) == ""

    def test_password_uniqueness(self):
        """Test that generated passwords are unique."""
        passwords = set()

        for _ in range(100):
            passwords.add(generate({"length": 16, "upper": True, "lower": True, "digits": True}))

        assert len(passwords) == 100

    def test_reproducible_with_seeded_source(self):
        """Test generation is driven entirely by the random source."""
        from conftest import SeededRandomSource

        options = {"length": 24, "upper": True, "lower": True, "pattern": "XX-1"}
        first = generate(options, SeededRandomSource(7))
        second = generate(options, SeededRandomSource(7))
        assert first == second


class TestPasswordGenerator:
    """Test PasswordGenerator class directly."""

    def test_raises_on_invalid_length(self):
        """Test invalid length raises from the class."""
        with pytest.raises(InvalidLengthError):
            PasswordGenerator(GenerationOptions(length=-1)).generate()

    def test_raises_without_categories(self):
        """Test missing categories raise from the class."""
        with pytest.raises(NoEligibleCategoriesError):
            PasswordGenerator(GenerationOptions(length=8)).generate()

    def test_eligible_sets_order(self):
        """Test eligible sets follow table order with include last."""
        options = GenerationOptions(
            length=8,
            include="~",
            categories=frozenset([CharCategory.DIGITS, CharCategory.UPPER]),
        )
        sets = PasswordGenerator(options).eligible_sets()
        assert sets == [
            CHAR_RANGES[CharCategory.UPPER],
            CHAR_RANGES[CharCategory.DIGITS],
            "~",
        ]

    def test_validate_whole_float(self):
        """Test validate returns an int for whole-number floats."""
        options = GenerationOptions(length=12.0, categories=frozenset([CharCategory.LOWER]))
        length = PasswordGenerator(options).validate()
        assert length == 12
        assert isinstance(length, int)

    def test_zero_length(self):
        """Test zero length gives an empty password."""
        options = GenerationOptions(length=0, categories=frozenset([CharCategory.UPPER]))
        assert PasswordGenerator(options).generate() == ""

    def test_charset_info(self):
        """Test charset information display."""
        options = GenerationOptions(
            length=12,
            pattern="Aaaa-X",
            include="xyz",
            categories=frozenset([CharCategory.LOWER, CharCategory.DIGITS]),
        )

        info = PasswordGenerator(options).get_charset_info()
        assert "lower" in info
        assert "digits" in info
        assert "3 custom characters" in info
        assert "pattern 'Aaaa-X'" in info
        assert "upper" not in info

    def test_charset_info_pronounceable(self):
        """Test charset information in pronounceable mode."""
        options = GenerationOptions(length=12, name="Pronounceable",
                                    categories=frozenset([CharCategory.UPPER]))
        assert PasswordGenerator(options).get_charset_info() == "pronounceable (with uppercase)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
