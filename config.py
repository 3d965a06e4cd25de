import json
from pathlib import Path

from tempo.alphabet import resolve_alphabet
from tempo.options import GenerationConfig
from tempo.pool import POOL_SIZE_MULTIPLIER

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class GeneratorConfig:
    __slots__ = ("time_length", "random_length", "pad_left", "alphabet", "start_time")
    
    def __init__(self, time_length=8, random_length=13, pad_left=True, alphabet="alphanumeric", start_time=None):
        self.time_length = time_length
        self.random_length = random_length
        self.pad_left = pad_left
        self.alphabet = alphabet
        self.start_time = start_time

    def to_options(self):
        return GenerationConfig(
            time_length=self.time_length,
            random_length=self.random_length,
            start_time=self.start_time,
            pad_left=self.pad_left,
            alphabet=resolve_alphabet(self.alphabet),
        ).validate()


class PoolConfig:
    __slots__ = ("multiplier",)
    
    def __init__(self, multiplier=POOL_SIZE_MULTIPLIER):
        self.multiplier = multiplier


class LoggingConfig:
    __slots__ = ("level",)
    
    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("generator", "pool", "logging")
    
    def __init__(self, generator=None, pool=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.pool = pool or PoolConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            PoolConfig(**d.get("pool", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG
    
    if not config_path.exists():
        return Config()
    
    with open(config_path) as file:
        return Config.from_dict(json.load(file))
