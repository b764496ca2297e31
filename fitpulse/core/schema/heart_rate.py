from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class HeartRateSample:
    time: Optional[str]
    value: int


@dataclass(frozen=True, slots=True)
class HeartRateSeries:
    dataset: Tuple[HeartRateSample, ...]

    def latest_value(self) -> Optional[int]:
        if not self.dataset:
            return None
        return self.dataset[-1].value
