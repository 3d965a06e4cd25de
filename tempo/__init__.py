from tempo.alphabet import DEFAULT_ALPHABET
from tempo.options import GenerationConfig
from tempo.pool import EntropyPool, get_pool
from tempo.random_string import random_string
from tempo.identifier import TempoId, configure_defaults, tempo_id

__all__ = [
    "DEFAULT_ALPHABET",
    "GenerationConfig",
    "EntropyPool",
    "get_pool",
    "random_string",
    "TempoId",
    "configure_defaults",
    "tempo_id",
]
