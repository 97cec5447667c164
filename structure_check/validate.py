"""
Validate the structure of a text artifact against a checklist.

Checks (must pass for an overall PASSED):
1) Every checklist pattern appears verbatim in the artifact

Running with no arguments checks spellCompiler.lua with the built-in
spell-compiler checklist, prints the report, and writes
compiler_validation_results.txt. The exit status is 0 regardless of the
verdict unless --strict is given.

Usage:
  python -m structure_check.validate
  python -m structure_check.validate --input src/spellCompiler.lua --strict
  python -m structure_check.validate --config checks.json --csv-out out.csv
"""
import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from structure_check.config.registry import get_checklist
from structure_check.config.registry import list_checklists
from structure_check.config.validator_config import ValidatorConfig
from structure_check.io import ArtifactReadError
from structure_check.validation.runner import validate

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> ValidatorConfig:
  """Build a ValidatorConfig from a config file and CLI overrides."""
  if args.config is not None:
    config = ValidatorConfig.from_file(args.config)
    logger.info('Loaded config: %s', args.config)
  else:
    config = ValidatorConfig.default()

  if args.checklist is not None:
    config.checklist = get_checklist(args.checklist)
  if args.input is not None:
    config.input_path = args.input
  if args.output is not None:
    config.output_path = args.output
  return config


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
  parser = argparse.ArgumentParser(
      description='Validate text artifact structure',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog=__doc__)
  parser.add_argument('--config',
                      type=Path,
                      default=None,
                      help='JSON config file')
  parser.add_argument('--input',
                      type=Path,
                      default=None,
                      help='Artifact to check (default: spellCompiler.lua)')
  parser.add_argument(
      '--output',
      type=Path,
      default=None,
      help='Report file (default: compiler_validation_results.txt)')
  parser.add_argument('--checklist',
                      type=str,
                      default=None,
                      choices=list_checklists(),
                      help='Registered checklist name')
  parser.add_argument('--csv-out',
                      type=Path,
                      default=None,
                      help='Also export per-check results as CSV')
  parser.add_argument('--strict',
                      action='store_true',
                      help='Exit with status 1 when validation fails')
  parser.add_argument('--verbose',
                      '-v',
                      action='store_true',
                      help='Enable debug logging')
  return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
  """CLI entrypoint."""
  args = _parse_args(argv)
  logging.basicConfig(
      level=logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )
  if args.verbose:
    logging.getLogger().setLevel(logging.DEBUG)

  try:
    config = build_config(args)
  except (OSError, ValueError) as e:
    logger.error('Invalid config: %s', e)
    return 1
  logger.info('Validating %s (%d checks)', config.input_path,
              len(config.checklist))

  try:
    report = validate(config, csv_path=args.csv_out)
  except ArtifactReadError as e:
    logger.error('%s', e)
    return 1

  if args.strict and not report.passed:
    return 1
  return 0


if __name__ == '__main__':
  raise SystemExit(main())
