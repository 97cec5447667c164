"""Base types for structural validation checks."""
from dataclasses import dataclass

PASSED = 'PASSED'
FAILED = 'FAILED'


def status_label(ok: bool) -> str:
  """Map a boolean outcome to its report label."""
  return PASSED if ok else FAILED


@dataclass(frozen=True)
class ChecklistEntry:
  """A required literal substring and the label it is reported under."""

  name: str
  pattern: str


@dataclass(frozen=True)
class CheckResult:
  """Result of testing one checklist entry against the target text."""

  name: str
  pattern: str
  passed: bool

  def __str__(self) -> str:
    return f'{self.name}: {status_label(self.passed)}'


def make_result(entry: ChecklistEntry, passed: bool) -> CheckResult:
  """Factory function for creating CheckResult from its entry."""
  return CheckResult(name=entry.name, pattern=entry.pattern, passed=passed)

