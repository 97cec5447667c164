"""
Validation report rendering.

The console report and the persisted report share one layout:

  === <TITLE> ===

  <name>: PASSED|FAILED
  ...

  Overall validation: PASSED|FAILED

  === VALIDATION COMPLETE ===

The persisted variant is prefixed with a single blank line. Rendering is
deterministic so reports can be compared against golden files.
"""
from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from structure_check.validation.base import CheckResult
from structure_check.validation.base import status_label
from structure_check.validation.checklist import aggregate

DEFAULT_TITLE = 'SPELL COMPILER STRUCTURE VALIDATION'
FOOTER = '=== VALIDATION COMPLETE ==='
REPORT_COLUMNS = ['name', 'pattern', 'passed']


@dataclass(frozen=True)
class ValidationReport:
  """All check results of one run plus the overall verdict."""

  title: str
  results: tuple[CheckResult, ...]
  passed: bool

  @classmethod
  def from_results(cls,
                   results: Sequence[CheckResult],
                   title: str = DEFAULT_TITLE) -> 'ValidationReport':
    """Build a report, deriving the verdict from results."""
    results = tuple(results)
    return cls(title=title, results=results, passed=aggregate(results))

  @property
  def failed_checks(self) -> list[CheckResult]:
    return [r for r in self.results if not r.passed]

  def render(self) -> str:
    return render(self.results, self.passed, title=self.title)

  def render_file_report(self) -> str:
    return render_file_report(self.results, self.passed, title=self.title)

  def to_frame(self) -> pd.DataFrame:
    return report_frame(self.results)


def render(results: Sequence[CheckResult],
           overall: bool,
           title: str = DEFAULT_TITLE) -> str:
  """
  Render the console report.

  Args:
    results: Check results in checklist order
    overall: Aggregate verdict
    title: Header text between the '===' markers

  Returns:
    Report text ending with a single newline
  """
  lines = [f'=== {title} ===', '']
  lines.extend(str(r) for r in results)
  lines.extend([
      '',
      f'Overall validation: {status_label(overall)}',
      '',
      FOOTER,
  ])
  return '\n'.join(lines) + '\n'


def render_file_report(results: Sequence[CheckResult],
                       overall: bool,
                       title: str = DEFAULT_TITLE) -> str:
  """Render the report written to the output file."""
  return '\n' + render(results, overall, title=title)


def report_frame(results: Sequence[CheckResult]) -> pd.DataFrame:
  """Tabulate results as one row per check, in checklist order."""
  rows = [{
      'name': r.name,
      'pattern': r.pattern,
      'passed': r.passed,
  } for r in results]
  return pd.DataFrame(rows, columns=REPORT_COLUMNS)
