"""
Instant: точка во времени в миллисекундах от эпохи

Immutable Pydantic модель. Значение всегда целое и лежит в диапазоне,
который представим объектом даты хоста, поэтому любой Instant
конвертируется в валидную дату и обратно без потерь.
"""

import math
from typing import Final, Optional

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import is_valid_float, to_number

# =============================================================================
# ГРАНИЦЫ
# =============================================================================

# -271821-04-20T00:00:00.000Z
MIN_INSTANT_MS: Final[int] = -8_640_000_000_000_000

# +275760-09-13T00:00:00.000Z
MAX_INSTANT_MS: Final[int] = 8_640_000_000_000_000


# =============================================================================
# INSTANT MODEL
# =============================================================================


class Instant(BaseModel):
    """
    Миллисекунды от 1970-01-01T00:00:00Z.

    Прямое создание строгое (только int в диапазоне); для значений
    неизвестного происхождения используйте Instant.from_epoch_ms.
    """

    epoch_ms: int = Field(
        ...,
        ge=MIN_INSTANT_MS,
        le=MAX_INSTANT_MS,
        description="Миллисекунды от эпохи (UTC)",
    )

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def from_epoch_ms(cls, value: float) -> Optional["Instant"]:
        """
        Безопасное создание Instant.

        Args:
            value: Миллисекунды от эпохи

        Returns:
            Instant или None, если значение не конечно, не целое
            или вне допустимого диапазона

        Examples:
            >>> Instant.from_epoch_ms(1515155400000.0)
            Instant(epoch_ms=1515155400000)
            >>> Instant.from_epoch_ms(float("nan")) is None
            True
        """
        number = to_number(value)
        if not is_valid_float(number) or number != math.trunc(number):
            return None

        epoch_ms = int(value) if isinstance(value, int) else int(number)
        if not MIN_INSTANT_MS <= epoch_ms <= MAX_INSTANT_MS:
            return None

        return cls(epoch_ms=epoch_ms)

    def as_float(self) -> float:
        """Значение в виде float (числовой тип хоста)."""
        return float(self.epoch_ms)

    def __lt__(self, other: "Instant") -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.epoch_ms < other.epoch_ms

    def __le__(self, other: "Instant") -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self.epoch_ms <= other.epoch_ms


EPOCH: Final[Instant] = Instant(epoch_ms=0)
