"""Time-sortable identifiers: fixed-width time prefix plus random suffix."""

import threading
from functools import total_ordering

from tempo.alphabet import DEFAULT_ALPHABET, check_alphabet_size
from tempo.codec import MAX_TIMESTAMP, decode, encode, max_value_for_length
from tempo.options import GenerationConfig
from tempo.random_string import random_string
from utils.timestamp import now_millis

_defaults = GenerationConfig()
_defaults_lock = threading.Lock()


def configure_defaults(options=None):
    """Set the options generate() and tempo_id(None) fall back to."""
    global _defaults
    options = (options or GenerationConfig()).validate()
    with _defaults_lock:
        _defaults = options
    return options


def get_defaults():
    return _defaults


def time_segment(time_length, time, start_time, pad_left, alphabet, now=None):
    if time_length == 0:
        return ""

    timestamp = time if time is not None else (now or now_millis)()
    if start_time is not None:
        # Unsigned subtraction: earlier-than-start timestamps wrap around
        timestamp = (timestamp - start_time) & MAX_TIMESTAMP

    timestamp %= max_value_for_length(time_length, alphabet) + 1
    encoded = encode(timestamp, alphabet)

    if pad_left:
        return encoded.rjust(time_length, alphabet[0])
    return encoded


def tempo_id(options=None, pool=None):
    """Build an identifier string from `options` (module defaults when None)."""
    options = options or _defaults
    check_alphabet_size(options.alphabet)

    random_part = random_string(options.random_length, options.alphabet, pool)
    time_part = time_segment(
        options.time_length,
        options.time,
        options.start_time,
        options.pad_left,
        options.alphabet,
    )
    return time_part + random_part


@total_ordering
class TempoId:
    """Identifier value. Compares, hashes and sorts as its string."""

    __slots__ = ("_inner",)

    def __init__(self, inner):
        self._inner = inner

    @classmethod
    def generate(cls):
        return cls(tempo_id())

    @classmethod
    def generate_with_alphabet(cls, alphabet):
        return cls(tempo_id(_defaults._replace(alphabet=alphabet)))

    @classmethod
    def generate_custom(cls, options):
        return cls(tempo_id(options))

    @classmethod
    def parse(cls, raw):
        """Wrap `raw` as-is; no length or alphabet checks."""
        return cls(raw)

    def to_string(self):
        return self._inner

    def time_value(self, alphabet=DEFAULT_ALPHABET, time_length=8):
        """Decode the time prefix back to its (reduced) millisecond value."""
        return decode(self._inner[:time_length], alphabet)

    def __str__(self):
        return self._inner

    def __repr__(self):
        return f"TempoId({self._inner!r})"

    def __len__(self):
        return len(self._inner)

    def __eq__(self, other):
        if not isinstance(other, TempoId):
            return NotImplemented
        return self._inner == other._inner

    def __lt__(self, other):
        if not isinstance(other, TempoId):
            return NotImplemented
        return self._inner < other._inner

    def __hash__(self):
        return hash(self._inner)
