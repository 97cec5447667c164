"""
I/O boundary for structural validation.

All file and console access lives here so the checklist logic stays pure.
The target artifact is always read completely before any output path is
touched, so a failed read never truncates a previous report.
"""

import logging
from pathlib import Path
from typing import Optional

from structure_check.validation.report import ValidationReport

logger = logging.getLogger(__name__)

ENCODING = 'utf-8'


class ArtifactReadError(OSError):
  """Target artifact is missing, unreadable, or not valid text."""


def load(path: Path) -> str:
  """
  Read the whole target artifact as text.

  Args:
    path: Path to the artifact

  Returns:
    File contents

  Raises:
    ArtifactReadError: If the file is missing, unreadable, or not UTF-8
  """
  path = Path(path)
  try:
    text = path.read_text(encoding=ENCODING)
  except UnicodeDecodeError as e:
    raise ArtifactReadError(f'Cannot decode {path} as {ENCODING}: {e}') from e
  except OSError as e:
    reason = e.strerror or type(e).__name__
    raise ArtifactReadError(f'Cannot read {path}: {reason}') from e

  logger.debug('Loaded %s (%d chars)', path, len(text))
  return text


def write_report(report: ValidationReport, output_path: Path) -> None:
  """Write the file variant of report, replacing any previous content."""
  output_path = Path(output_path)
  output_path.parent.mkdir(parents=True, exist_ok=True)
  output_path.write_text(report.render_file_report(), encoding=ENCODING)
  logger.info('Wrote report: %s', output_path)


def write_csv(report: ValidationReport, csv_path: Path) -> None:
  """Export per-check results as CSV."""
  csv_path = Path(csv_path)
  csv_path.parent.mkdir(parents=True, exist_ok=True)
  report.to_frame().to_csv(csv_path, index=False)
  logger.info('Wrote CSV: %s (%d checks)', csv_path, len(report.results))


def emit(report: ValidationReport,
         output_path: Path,
         *,
         csv_path: Optional[Path] = None) -> None:
  """
  Print report to stdout and persist it.

  Args:
    report: Report to emit
    output_path: Text report destination (overwritten)
    csv_path: Optional CSV export destination
  """
  print(report.render(), end='')
  write_report(report, output_path)
  if csv_path is not None:
    write_csv(report, csv_path)
