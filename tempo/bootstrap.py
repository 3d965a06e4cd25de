"""Apply a Config to the process-wide logger, pool and defaults."""

from config import load_config
from internal.logging import get_logger, LogLevel, StructuredLogger
from tempo.pool import EntropyPool
from tempo.identifier import configure_defaults


def configure(config=None):
    config = config or load_config()

    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    EntropyPool.configure(multiplier=config.pool.multiplier)
    options = configure_defaults(config.generator.to_options())

    get_logger().info(
        "tempo configured",
        time_length=options.time_length,
        random_length=options.random_length,
        alphabet_size=len(options.alphabet),
        pool_multiplier=config.pool.multiplier,
    )
    return config
