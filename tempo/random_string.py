"""Unbiased random strings over arbitrary alphabets."""

from tempo.alphabet import check_alphabet_size
from tempo.pool import get_pool


def random_string(length, alphabet, pool=None):
    """Draw `length` characters uniformly from `alphabet`.

    Each byte is masked down to the smallest power-of-two range covering the
    alphabet and rejected when it lands past the end, which avoids the bias a
    plain modulo would introduce. Bytes come from `pool` in batches of
    `length * 2`.
    """
    if length <= 0:
        return ""
    check_alphabet_size(alphabet)
    pool = pool or get_pool()

    alphabet_size = len(alphabet)
    mask = (1 << (alphabet_size - 1).bit_length()) - 1

    chars = []
    random_bytes = b""
    random_index = 0
    while len(chars) < length:
        if random_index >= len(random_bytes):
            random_bytes = pool.take(length * 2)
            random_index = 0
        character_index = random_bytes[random_index] & mask
        random_index += 1
        if character_index < alphabet_size:
            chars.append(alphabet[character_index])
    return "".join(chars)
