"""Configuration for tiered frame layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


@dataclass(frozen=True)
class TierConfig:
    """Tier ladder bounds for tiered hex framing.

    Frame lengths are powers of two starting at ``min_tier`` and doubling until
    the payload fits. The ladder has no ceiling unless ``max_tier`` is set.

    Attributes:
        min_tier: Smallest frame length in bytes (default 8). Must be a power
            of two and at least 8, leaving room for the 4-byte length prefix.
        max_tier: Largest accepted frame length in bytes, or None for no ceiling.
            When set, marshal fails for payloads needing a larger tier and
            unmarshal rejects larger frames, both with InvalidDataError.

    Examples:
        ```python
        from encodingx.codecs import Hex
        from encodingx.framing import TierConfig

        # Cap frames at 4 KiB (8 KiB of hex text)
        capped = Hex(config=TierConfig(max_tier=4096))
        ```
    """

    min_tier: int = 8
    max_tier: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.min_tier < 8 or not _is_power_of_two(self.min_tier):
            raise ValueError(f"min_tier must be a power of two >= 8, got {self.min_tier}")

        if self.max_tier is not None:
            if not _is_power_of_two(self.max_tier):
                raise ValueError(f"max_tier must be a power of two, got {self.max_tier}")
            if self.max_tier < self.min_tier:
                raise ValueError(
                    f"max_tier must be >= min_tier ({self.min_tier}), got {self.max_tier}"
                )


DEFAULT_TIER_CONFIG = TierConfig()
RAND_TIER_CONFIG = TierConfig(min_tier=16)
