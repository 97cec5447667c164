"""
Structural validation of text artifacts.

Checks that a target text file contains every required literal substring
from an ordered checklist, prints a PASSED/FAILED line per check with an
overall verdict, and writes the same report to a file.

Usage:
  from structure_check.config import ValidatorConfig
  from structure_check.validation.runner import validate

  report = validate(ValidatorConfig.default())
  print(report.passed)
"""
