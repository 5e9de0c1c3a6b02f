"""
Data models for the quote engine.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field, asdict
from typing import Optional


QUOTED = "quoted"
REJECTED = "rejected"


@dataclass
class TraceStep:
    """A single step in the quote resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class ValidationResult:
    """Pass/fail outcome of a limit check. `error` is only set on failure."""
    valid: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> 'ValidationResult':
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> 'ValidationResult':
        return cls(valid=False, error=error)


@dataclass
class Package:
    """A package to be quoted. Units are whatever the counter uses, consistently."""
    weight: float
    width: float
    height: float
    length: float

    @property
    def dimension_total(self) -> float:
        """Combined dimensions (width + height + length) checked against the size limit."""
        return self.width + self.height + self.length


@dataclass
class Quote:
    """Complete result of quoting a package."""
    package: Package
    status: str  # "quoted" or "rejected"
    total: Optional[float] = None
    error: Optional[str] = None
    trace: list[TraceStep] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.status == QUOTED

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the quote trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def formatted_total(self) -> Optional[str]:
        """Dollar amount as shown to the customer, rounded to two decimals."""
        if self.total is None:
            return None
        return format_currency(self.total)

    def to_dict(self) -> dict:
        """Convert to a plain dict for JSON responses and tables."""
        data = asdict(self)
        data["formatted_total"] = self.formatted_total()
        return data


def format_currency(amount: float) -> str:
    return f"${amount:.2f}"
