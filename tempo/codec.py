"""Positional base-N conversion over arbitrary alphabets."""

# Time fields are sized against unsigned 64-bit millisecond timestamps
MAX_TIMESTAMP = 2 ** 64 - 1


def max_value_for_length(length, alphabet):
    """Largest number representable in `length` digits of `alphabet`."""
    return len(alphabet) ** length - 1


def fits_timestamp(length, alphabet):
    return max_value_for_length(length, alphabet) <= MAX_TIMESTAMP


def encode(number, alphabet):
    """Encode a non-negative integer, most significant digit first.

    Zero encodes to the single zero character, never to an empty string.
    """
    if number < 0:
        raise ValueError(f"cannot encode negative number {number}")
    base = len(alphabet)
    if number == 0:
        return alphabet[0]

    digits = []
    while number > 0:
        number, remainder = divmod(number, base)
        digits.append(alphabet[remainder])
    return "".join(reversed(digits))


def decode(encoded, alphabet):
    """Inverse of encode(). Leading zero characters are ignored."""
    base = len(alphabet)
    index = {char: position for position, char in enumerate(alphabet)}
    number = 0
    for char in encoded:
        try:
            number = number * base + index[char]
        except KeyError:
            raise ValueError(f"character {char!r} is not in the alphabet") from None
    return number
