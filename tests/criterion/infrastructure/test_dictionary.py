"""Tests for DictionaryCriterion."""

import pytest

from pw_strength.criterion.domain.charset import WEAK_SUBSTRINGS
from pw_strength.criterion.infrastructure.dictionary import DictionaryCriterion


class TestDictionaryCriterionDescriptor:
    """DictionaryCriterion exposes a fixed name and a maximum score of 10."""

    def test_descriptor(self) -> None:
        descriptor = DictionaryCriterion().descriptor

        assert descriptor.name == "Not a Common Word/Pattern"
        assert descriptor.max_score == 10


class TestDictionaryCriterionCheck:
    """Any weak substring, in any case, fails the rule."""

    def test_mixed_case_weak_word_fails(self) -> None:
        verdict = DictionaryCriterion().check("MyPassword99!")

        assert verdict.met is False
        assert verdict.score == 0
        assert verdict.message == (
            "Warning: Contains a common or dictionary word/sequence."
        )

    def test_clean_password_passes(self) -> None:
        verdict = DictionaryCriterion().check("Tr0ub4dor&3")

        assert verdict.met is True
        assert verdict.score == 10
        assert verdict.message == (
            "Password does not contain common dictionary words."
        )

    @pytest.mark.parametrize("weak", sorted(WEAK_SUBSTRINGS))
    def test_every_weak_substring_fails(self, weak: str) -> None:
        assert DictionaryCriterion().check(f"X9!{weak.upper()}#").met is False

    def test_substring_match_flags_embedded_terms(self) -> None:
        # Substring, not whole-word matching: "abc" inside a longer word.
        assert DictionaryCriterion().check("myabcdef").met is False

    def test_digit_substitution_is_not_normalised(self) -> None:
        assert DictionaryCriterion().check("Passw0rd!").met is True

    def test_custom_weak_list(self) -> None:
        criterion = DictionaryCriterion(weak_substrings=frozenset({"letmein"}))

        assert criterion.check("LetMeIn2024").met is False
        assert criterion.check("password").met is True


class TestWeakSubstrings:
    """The weak list is an immutable, process-wide constant."""

    def test_weak_list_contents(self) -> None:
        assert WEAK_SUBSTRINGS == {
            "password",
            "123456",
            "qwerty",
            "admin",
            "qazwsx",
            "12345678",
            "abc",
            "god",
            "user",
            "access",
        }

    def test_weak_list_is_frozen(self) -> None:
        assert isinstance(WEAK_SUBSTRINGS, frozenset)
