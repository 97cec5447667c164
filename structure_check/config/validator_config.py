"""
Validator configuration.

ValidatorConfig carries everything a validation run depends on: where the
target artifact lives, where the report goes, and the checklist to apply.
It serializes to JSON so runs can be reproduced from a config file.
"""

from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
import json
from pathlib import Path
from typing import Any

from structure_check.validation.base import ChecklistEntry
from structure_check.validation.checklist import SPELL_COMPILER_CHECKLIST
from structure_check.validation.report import DEFAULT_TITLE

DEFAULT_INPUT_PATH = Path('spellCompiler.lua')
DEFAULT_OUTPUT_PATH = Path('compiler_validation_results.txt')
_STRING_KEYS = ('input_path', 'output_path', 'title')


@dataclass
class ValidatorConfig:
  """
  Configuration for a structural validation run.

  Attributes:
    input_path: Target text artifact to check
    output_path: Report file, overwritten on every run
    checklist: Ordered (name, pattern) entries
    title: Report header text
  """
  input_path: Path = DEFAULT_INPUT_PATH
  output_path: Path = DEFAULT_OUTPUT_PATH
  checklist: tuple[ChecklistEntry, ...] = field(
      default_factory=lambda: SPELL_COMPILER_CHECKLIST)
  title: str = DEFAULT_TITLE

  def __post_init__(self) -> None:
    self.input_path = Path(self.input_path)
    self.output_path = Path(self.output_path)
    self.checklist = tuple(self.checklist)

  @classmethod
  def default(cls) -> 'ValidatorConfig':
    """
    Create the spell-compiler configuration.

    Uses:
      - spellCompiler.lua in the working directory
      - compiler_validation_results.txt as the report file
      - the eight spell-compiler structure checks
    """
    return cls()

  def to_dict(self) -> dict[str, Any]:
    """Convert to a JSON-friendly dictionary."""
    return {
        'input_path': str(self.input_path),
        'output_path': str(self.output_path),
        'checklist': [{
            'name': e.name,
            'pattern': e.pattern
        } for e in self.checklist],
        'title': self.title,
    }

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'ValidatorConfig':
    """
    Create from dictionary.

    Missing keys fall back to defaults.

    Raises:
      ValueError: On a non-object config, unknown keys, non-string
        paths or title, or malformed checklist entries
    """
    if not isinstance(data, dict):
      raise ValueError(
          f'config must be a JSON object, got {type(data).__name__}')

    known = {f.name for f in fields(cls)}
    unknown = set(data) - known
    if unknown:
      raise ValueError(f'Unknown config keys: {sorted(unknown)}')

    for key in _STRING_KEYS:
      if key in data and not isinstance(data[key], str):
        raise ValueError(
            f'{key} must be a string, got {type(data[key]).__name__}')

    kwargs = dict(data)
    if 'checklist' in kwargs:
      kwargs['checklist'] = _parse_checklist(kwargs['checklist'])
    return cls(**kwargs)

  @classmethod
  def from_json(cls, json_str: str) -> 'ValidatorConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))

  @classmethod
  def from_file(cls, path: Path) -> 'ValidatorConfig':
    """Create from a JSON config file."""
    return cls.from_json(Path(path).read_text(encoding='utf-8'))


def _parse_checklist(raw: Any) -> tuple[ChecklistEntry, ...]:
  """Parse a list of {'name', 'pattern'} objects into entries."""
  if not isinstance(raw, list):
    raise ValueError(f'checklist must be a list, got {type(raw).__name__}')

  entries = []
  for i, item in enumerate(raw):
    if not isinstance(item, dict) or set(item) != {'name', 'pattern'}:
      raise ValueError(
          f'checklist[{i}] must have exactly "name" and "pattern": {item!r}')
    if not isinstance(item['name'], str) or not isinstance(
        item['pattern'], str):
      raise ValueError(f'checklist[{i}] name and pattern must be strings')
    entries.append(ChecklistEntry(name=item['name'], pattern=item['pattern']))
  return tuple(entries)
