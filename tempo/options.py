"""Generation options."""

from typing import NamedTuple, Optional

from core.errors import ConfigurationError
from tempo.alphabet import DEFAULT_ALPHABET, validate_alphabet
from tempo.codec import MAX_TIMESTAMP, fits_timestamp


class GenerationConfig(NamedTuple):
    """Immutable parameters for one identifier.

    time_length: characters reserved for the time segment, 0 disables it
    random_length: characters in the random segment
    time: explicit timestamp in milliseconds, wall clock when None
    start_time: epoch offset in milliseconds subtracted from the timestamp
    pad_left: left-pad the time segment with the alphabet's zero character
    alphabet: digit set for both segments
    """

    time_length: int = 8
    random_length: int = 13
    time: Optional[int] = None
    start_time: Optional[int] = None
    pad_left: bool = True
    alphabet: str = DEFAULT_ALPHABET

    def validate(self):
        for field in ("time_length", "random_length"):
            value = getattr(self, field)
            if not isinstance(value, int) or value < 0:
                raise ConfigurationError(f"{field} must be a non-negative integer, got {value!r}", field=field)
        for field in ("time", "start_time"):
            value = getattr(self, field)
            if value is not None and (not isinstance(value, int) or not 0 <= value <= MAX_TIMESTAMP):
                raise ConfigurationError(f"{field} must be an unsigned 64-bit integer, got {value!r}", field=field)
        validate_alphabet(self.alphabet)
        if not fits_timestamp(self.time_length, self.alphabet):
            raise ConfigurationError(
                f"time_length {self.time_length} overflows a 64-bit timestamp for alphabet size {len(self.alphabet)}",
                field="time_length",
            )
        return self
