"""
Configuration defaults for the binary edit engine.
"""

import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional

DEFAULT_UNDO_DEPTH: Final[int] = 100
DEFAULT_BLOCK_SIZE: Final[int] = 256
DEFAULT_BYTES_PER_ROW: Final[int] = 16
EXPORT_PREFIX: Final[str] = "edited_"

ENV_UNDO_DEPTH: Final[str] = "BINEDIT_UNDO_DEPTH"
ENV_BLOCK_SIZE: Final[str] = "BINEDIT_BLOCK_SIZE"
ENV_BYTES_PER_ROW: Final[str] = "BINEDIT_BYTES_PER_ROW"


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default

    try:
        value = int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")

    return value


@dataclass(frozen=True)
class EditorConfig:
    """Tunable limits of an edit session."""

    undo_depth: int = DEFAULT_UNDO_DEPTH
    block_size: int = DEFAULT_BLOCK_SIZE
    bytes_per_row: int = DEFAULT_BYTES_PER_ROW

    def __post_init__(self) -> None:
        for field_name in ('undo_depth', 'block_size', 'bytes_per_row'):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"{field_name} must be positive")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'EditorConfig':
        """
        Build a configuration from environment variables.

        Args:
            env: Mapping to read from, defaults to os.environ

        Returns:
            EditorConfig: Configuration with unset variables left at their defaults
        """

        if env is None:
            env = os.environ

        return cls(
            undo_depth=_positive_int(env, ENV_UNDO_DEPTH, DEFAULT_UNDO_DEPTH),
            block_size=_positive_int(env, ENV_BLOCK_SIZE, DEFAULT_BLOCK_SIZE),
            bytes_per_row=_positive_int(env, ENV_BYTES_PER_ROW, DEFAULT_BYTES_PER_ROW),
        )
