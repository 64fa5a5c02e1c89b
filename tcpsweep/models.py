from dataclasses import dataclass
from typing import Optional

from .errors import RangeValidationError

MAX_TIMEOUT = 3600.0


@dataclass(frozen=True)
class AddressRange:
    start: str
    end: str

    @property
    def is_single(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class PortRange:
    start: int
    end: int

    def __iter__(self):
        return iter(range(self.start, self.end + 1))

    def __len__(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class ProbeResult:
    address: str
    port: int
    reachable: bool
    service: Optional[str] = None


@dataclass(frozen=True)
class ScanConfig:
    addresses: AddressRange
    ports: PortRange
    threads: int = 100
    timeout: float = 3.0

    def __post_init__(self):
        if self.threads < 1:
            raise RangeValidationError(f"threads must be >= 1, got {self.threads}")
        if not 0 < self.timeout <= MAX_TIMEOUT:
            raise RangeValidationError(
                f"timeout must be between 0 and {MAX_TIMEOUT:g}s, got {self.timeout}"
            )
