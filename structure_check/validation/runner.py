"""
Structural validation runner.

Orchestrates a single run: load the artifact, evaluate the checklist,
aggregate the verdict, and report.

Usage:
  runner = StructureValidator(ValidatorConfig.default())
  report = runner.run()
  runner.log_summary()
"""
import logging
from pathlib import Path
from typing import Optional

from structure_check import io
from structure_check.config.validator_config import ValidatorConfig
from structure_check.validation.base import CheckResult
from structure_check.validation.checklist import evaluate
from structure_check.validation.report import ValidationReport

logger = logging.getLogger(__name__)


class StructureValidator:
  """Run a checklist against one text artifact."""

  def __init__(self, config: ValidatorConfig):
    self.config = config
    self.report: Optional[ValidationReport] = None

  def run(self, text: Optional[str] = None) -> ValidationReport:
    """
    Execute all checks.

    Args:
      text: Artifact contents; read from config.input_path when omitted

    Returns:
      ValidationReport with one result per checklist entry

    Raises:
      ArtifactReadError: If the artifact cannot be read
    """
    if text is None:
      text = io.load(self.config.input_path)

    results = evaluate(text, self.config.checklist)
    self.report = ValidationReport.from_results(results,
                                                title=self.config.title)
    return self.report

  def _require_report(self) -> ValidationReport:
    if self.report is None:
      raise RuntimeError('run() has not been called')
    return self.report

  def log_summary(self) -> None:
    """Log validation summary using logger."""
    report = self._require_report()
    passed = sum(1 for r in report.results if r.passed)

    logger.info('%s: %d/%d checks passed', report.title, passed,
                len(report.results))
    for r in report.results:
      level = logging.INFO if r.passed else logging.ERROR
      logger.log(level, '%s %s (pattern: %r)', '✓' if r.passed else '✗',
                 r.name, r.pattern)

    failed = len(report.results) - passed
    if failed > 0:
      logger.error('%d checks FAILED', failed)

  @property
  def all_passed(self) -> bool:
    """Return True if every check passed."""
    return self._require_report().passed

  @property
  def failed_checks(self) -> list[CheckResult]:
    """Return list of failed checks."""
    return self._require_report().failed_checks


def validate(config: ValidatorConfig,
             csv_path: Optional[Path] = None) -> ValidationReport:
  """
  Run a full validation: read, evaluate, print, and write the report.

  The artifact is read before anything is written, so a read failure
  leaves an existing report file untouched.
  """
  runner = StructureValidator(config)
  report = runner.run()
  io.emit(report, config.output_path, csv_path=csv_path)
  runner.log_summary()
  return report
