"""Configuration constants for pairsim."""

import logging
from os import environ
from typing import Final

# Logging configuration
LOG_LEVEL: Final = environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT: Final = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


def _env_int(name: str, default: int) -> int:
    """Read integer env var with fallback."""
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    """Read normalized string env var."""
    raw = environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower()


# Coefficients known to the registry in core.coefficients
COEFFICIENT_NAMES: Final = (
    "jaccard",
    "simpson",
    "braun_blanquet",
    "czekanowski",
    "sokal_sneath",
    "kulczynski1",
    "kulczynski2",
    "otsuka",
)

# Value cache
VCACHE_CAPACITY: Final = _env_int("PAIRSIM_CACHE_CAPACITY", 1_000_000)  # FIFO eviction limit
DEFAULT_COEFFICIENT: Final = _env_str("PAIRSIM_COEFFICIENT", "jaccard")

# Pair keys are unsigned 64-bit
KEY_BITS: Final = 64
KEY_MAX: Final = (1 << KEY_BITS) - 1

# ---------------------------------------------------------------------------
# Configuration validation
# ---------------------------------------------------------------------------


def _validate_config() -> None:
    """Validate configuration constants at module load time."""
    errors: list[str] = []

    if VCACHE_CAPACITY <= 0:
        errors.append(f"PAIRSIM_CACHE_CAPACITY ({VCACHE_CAPACITY}) must be > 0")

    if DEFAULT_COEFFICIENT not in COEFFICIENT_NAMES:
        errors.append(
            f"PAIRSIM_COEFFICIENT ({DEFAULT_COEFFICIENT}) must be one of: "
            + ", ".join(COEFFICIENT_NAMES)
        )

    if errors:
        raise ValueError("Configuration errors:\n  " + "\n  ".join(errors))


_validate_config()
