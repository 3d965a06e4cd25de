"""Character sets usable as identifier alphabets.

The first character of each set is its zero/padding digit.
"""

from collections import Counter

from core.errors import InvalidAlphabetError

NUMBERS = "0123456789"
HEXADECIMAL_LOWERCASE = "0123456789abcdef"
HEXADECIMAL_UPPERCASE = "0123456789ABCDEF"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
# Drops characters that are easily confused (0/O, 1/l/I, 2/Z, 5/S ...)
NO_DOPPELGANGER = "346789AaBbCcDdEeFfGgHhiJjKkLMmNnPpQqRrTtUVWwXxYyz"
ALPHANUMERIC = "0123456789AaBbCcDdEeFfGgHhIiJjKkLlMmNnOoPpQqRrSsTtUuVvWwXxYyZz"
URL = ALPHANUMERIC + "-_"
BASE64 = ALPHANUMERIC + "+/"

DEFAULT_ALPHABET = ALPHANUMERIC

# Bytes drawn from the entropy pool index the alphabet directly
MAX_ALPHABET_SIZE = 256

ALPHABETS = {
    "numbers": NUMBERS,
    "hexadecimal_lowercase": HEXADECIMAL_LOWERCASE,
    "hexadecimal_uppercase": HEXADECIMAL_UPPERCASE,
    "lowercase": LOWERCASE,
    "uppercase": UPPERCASE,
    "no_doppelganger": NO_DOPPELGANGER,
    "alphanumeric": ALPHANUMERIC,
    "url": URL,
    "base64": BASE64,
}


def resolve_alphabet(value):
    """Return the catalog alphabet named `value`, or `value` itself."""
    if value is None:
        return DEFAULT_ALPHABET
    return ALPHABETS.get(value.lower(), value)


def check_alphabet_size(alphabet):
    size = len(alphabet)
    if size < 2:
        raise InvalidAlphabetError(f"invalid alphabet: needs at least 2 characters, got {size}", alphabet=alphabet)
    if size > MAX_ALPHABET_SIZE:
        raise InvalidAlphabetError(f"invalid alphabet: at most {MAX_ALPHABET_SIZE} characters, got {size}",
                                   alphabet=alphabet)


def validate_alphabet(alphabet):
    """Raise InvalidAlphabetError unless `alphabet` is a usable digit set."""
    if not isinstance(alphabet, str):
        raise InvalidAlphabetError(f"invalid alphabet: expected str, got {type(alphabet).__name__}")
    check_alphabet_size(alphabet)
    duplicates = sorted(char for char, count in Counter(alphabet).items() if count > 1)
    if duplicates:
        raise InvalidAlphabetError(f"invalid alphabet: duplicate characters {''.join(duplicates)!r}",
                                   alphabet=alphabet)
    return alphabet
