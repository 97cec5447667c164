"""
Checklist evaluation.

A checklist is an ordered sequence of ChecklistEntry values. Each entry is
tested as an exact, case-sensitive substring of the target text. There is no
regex or wildcard handling and no short-circuiting: every entry produces a
result, in checklist order.
"""
from collections.abc import Iterable
from collections.abc import Sequence

from structure_check.validation.base import ChecklistEntry
from structure_check.validation.base import CheckResult
from structure_check.validation.base import make_result

Checklist = Sequence[ChecklistEntry]

SPELL_COMPILER_CHECKLIST: tuple[ChecklistEntry, ...] = (
    ChecklistEntry('Has SpellCompiler table', 'local SpellCompiler = {}'),
    ChecklistEntry('Has mergeTables helper function',
                   'local function mergeTables(target, source)'),
    ChecklistEntry('Has compileSpell function',
                   'function SpellCompiler.compileSpell(spellDef, keywordData)'),
    ChecklistEntry('Has debugCompiled function',
                   'function SpellCompiler.debugCompiled(compiledSpell)'),
    ChecklistEntry('Creates behavior table', 'behavior = {}'),
    ChecklistEntry('Handles boolean keywords', 'type(params) == "boolean"'),
    ChecklistEntry('Executes behaviors',
                   'executeAll = function(caster, target, results)'),
    ChecklistEntry('Returns compiled spell', 'return compiledSpell'),
)


def evaluate(text: str, checklist: Checklist) -> tuple[CheckResult, ...]:
  """
  Test every checklist entry against text.

  Args:
    text: Full contents of the target artifact
    checklist: Ordered checklist entries

  Returns:
    One CheckResult per entry, in the same order as checklist
  """
  return tuple(make_result(entry, entry.pattern in text) for entry in checklist)


def aggregate(results: Iterable[CheckResult]) -> bool:
  """Overall verdict: True iff every result passed (True when empty)."""
  return all(r.passed for r in results)
