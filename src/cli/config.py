"""Конфигурация консольного меню.

Параметры меню:
- dimension: размерность обоих векторов (по умолчанию 3)
- dtype: тип элементов (по умолчанию float64)
- log_level / log_format: настройки логирования
"""

import argparse
from dataclasses import dataclass
from typing import Final, Sequence

from src.core.math.numerical_safeguards import validate_dimension
from src.core.math.promotion import as_element_dtype


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_DIMENSION: Final[int] = 3
DEFAULT_DTYPE_NAME: Final[str] = "float64"
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS: Final[tuple[str, ...]] = ("text", "json")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MenuConfig:
    """Конфигурация меню.

    Невалидные значения отклоняются при создании (ValueError).
    """

    dimension: int = DEFAULT_DIMENSION
    dtype: str = DEFAULT_DTYPE_NAME
    log_level: str = "WARNING"
    log_format: str = "text"

    def __post_init__(self) -> None:
        try:
            dimension = validate_dimension(self.dimension)
            dtype = as_element_dtype(self.dtype)
        except TypeError as e:
            raise ValueError(str(e)) from e

        if dimension == 0:
            raise ValueError("dimension must be positive for the menu, got 0")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        if self.log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {self.log_format!r}")

        object.__setattr__(self, "dimension", dimension)
        object.__setattr__(self, "dtype", str(dtype))
        object.__setattr__(self, "log_level", self.log_level.upper())

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> "MenuConfig":
        """Конфигурация из аргументов командной строки."""
        args = build_parser().parse_args(argv)
        return cls(
            dimension=args.dimension,
            dtype=args.dtype,
            log_level=args.log_level,
            log_format=args.log_format,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fixvec",
        description="Interactive arithmetic on two fixed-dimension vectors",
    )
    parser.add_argument("--dimension", type=int, default=DEFAULT_DIMENSION,
                        help=f"Vector dimension (default: {DEFAULT_DIMENSION})")
    parser.add_argument("--dtype", default=DEFAULT_DTYPE_NAME,
                        help=f"Element type, e.g. int64, float32 (default: {DEFAULT_DTYPE_NAME})")
    parser.add_argument("--log-level", default="WARNING",
                        choices=LOG_LEVELS, type=str.upper,
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-format", default="text", choices=LOG_FORMATS,
                        help="Log output format (default: text)")
    return parser
