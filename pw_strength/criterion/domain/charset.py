"""Process-wide character sets and weak-substring list used by the rules."""

import string

UPPERCASE: frozenset[str] = frozenset(string.ascii_uppercase)
LOWERCASE: frozenset[str] = frozenset(string.ascii_lowercase)
DIGITS: frozenset[str] = frozenset(string.digits)
SPECIAL_CHARACTERS: frozenset[str] = frozenset("!@#$%^&*()-+={}[]|\\:;\"'<>,.?/`~")

# Matched as lower-case substrings, not whole words.
WEAK_SUBSTRINGS: frozenset[str] = frozenset(
    {
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
)
