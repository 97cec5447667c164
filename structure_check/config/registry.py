"""
Checklist registry for mapping string names to checklists.

Lets configs and the CLI refer to a checklist by name (JSON friendly)
instead of spelling out every entry.

To add a new checklist:
1. Define the entries as a tuple of ChecklistEntry
   (e.g., in validation/checklist.py)
2. Register a factory returning them in CHECKLISTS

Example:
  MY_CHECKLIST = (
      ChecklistEntry('Has main', 'def main('),
  )

  CHECKLISTS['my_checklist'] = lambda: MY_CHECKLIST
"""

from collections.abc import Callable

from structure_check.validation.base import ChecklistEntry
from structure_check.validation.checklist import SPELL_COMPILER_CHECKLIST

CHECKLISTS: dict[str, Callable[[], tuple[ChecklistEntry, ...]]] = {
    'spell_compiler': lambda: SPELL_COMPILER_CHECKLIST,
}


def get_checklist(name: str) -> tuple[ChecklistEntry, ...]:
  """
  Look up a registered checklist.

  Raises:
    ValueError: If name is not registered
  """
  if name not in CHECKLISTS:
    raise ValueError(f'Unknown checklist: {name}. '
                     f'Available: {list_checklists()}')
  return CHECKLISTS[name]()


def list_checklists() -> list[str]:
  """List registered checklist names."""
  return sorted(CHECKLISTS)
