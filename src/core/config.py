"""Application settings read from the environment.

Environment variables:
    WHATOEAT_DATA_DIR: Directory holding the bundled data files (default: data).
    WHATOEAT_DEFAULT_SOURCE: Data source loaded at startup (default: information).
    WHATOEAT_SPIN_PRESET: "classic" or "roulette" (default: roulette).
    WHATOEAT_SPIN_MIN_SECONDS / WHATOEAT_SPIN_MAX_SECONDS: Override the
        preset's spin duration range.
"""

from dataclasses import dataclass, field, replace
from os import getenv
from pathlib import Path


@dataclass(frozen=True)
class SpinSettings:
    """Timing of a randomized spin.

    Attributes:
        min_seconds: Lower bound of the random total spin duration.
        max_seconds: Upper bound of the random total spin duration.
        initial_delay: Delay before the first tick, in seconds.
        growth: Factor applied to the delay after every tick. 1.0 keeps a
            fixed tick rate; values above 1.0 slow the spin down.
        max_delay: Cap on the per-tick delay.
        reveal_delay: Pause between the settle and revealing card labels.
    """

    min_seconds: float
    max_seconds: float
    initial_delay: float
    growth: float = 1.0
    max_delay: float = 0.5
    reveal_delay: float = 0.0

    def __post_init__(self) -> None:
        if self.min_seconds <= 0 or self.max_seconds < self.min_seconds:
            raise ValueError(
                f"Invalid spin duration range: {self.min_seconds}-{self.max_seconds}"
            )
        if self.initial_delay <= 0 or self.max_delay < self.initial_delay:
            raise ValueError(
                f"Invalid tick delays: initial={self.initial_delay}, "
                f"max={self.max_delay}"
            )
        if self.growth < 1.0:
            raise ValueError(f"Tick delay growth must be >= 1.0, got {self.growth}")
        if self.reveal_delay < 0:
            raise ValueError(f"Reveal delay must be >= 0, got {self.reveal_delay}")


# Six half-second jumps at most, as in the first release of the app
CLASSIC_SPIN = SpinSettings(
    min_seconds=1.5,
    max_seconds=3.0,
    initial_delay=0.5,
    growth=1.0,
    max_delay=0.5,
)

# Continuous spin that slows down like a roulette wheel
ROULETTE_SPIN = SpinSettings(
    min_seconds=8.0,
    max_seconds=15.0,
    initial_delay=0.05,
    growth=1.10,
    max_delay=0.5,
    reveal_delay=0.3,
)

SPIN_PRESETS: dict[str, SpinSettings] = {
    "classic": CLASSIC_SPIN,
    "roulette": ROULETTE_SPIN,
}


@dataclass(frozen=True)
class AppSettings:
    """Top-level settings for a carousel session."""

    data_dir: Path = Path("data")
    default_source: str = "information"
    spin: SpinSettings = field(default_factory=lambda: ROULETTE_SPIN)


def _float_env(name: str) -> float | None:
    raw = getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as ex:
        raise ValueError(f"{name} must be a number, got {raw!r}") from ex


def load_settings() -> AppSettings:
    """Build AppSettings from environment variables.

    Returns:
        The resolved settings.

    Raises:
        ValueError: If the spin preset is unknown or a numeric override
            is not a valid number or produces an invalid duration range.
    """
    preset_name = getenv("WHATOEAT_SPIN_PRESET", "roulette").lower()
    if preset_name not in SPIN_PRESETS:
        raise ValueError(
            f"Unsupported spin preset: {preset_name!r}. "
            f"Supported presets: {', '.join(sorted(SPIN_PRESETS))}"
        )
    spin = SPIN_PRESETS[preset_name]

    min_seconds = _float_env("WHATOEAT_SPIN_MIN_SECONDS")
    max_seconds = _float_env("WHATOEAT_SPIN_MAX_SECONDS")
    if min_seconds is not None or max_seconds is not None:
        spin = replace(
            spin,
            min_seconds=spin.min_seconds if min_seconds is None else min_seconds,
            max_seconds=spin.max_seconds if max_seconds is None else max_seconds,
        )

    return AppSettings(
        data_dir=Path(getenv("WHATOEAT_DATA_DIR", "data")),
        default_source=getenv("WHATOEAT_DEFAULT_SOURCE", "information"),
        spin=spin,
    )
