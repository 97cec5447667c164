import dataclasses

import pytest

from structure_check.validation.base import ChecklistEntry
from structure_check.validation.base import CheckResult
from structure_check.validation.base import make_result
from structure_check.validation.base import status_label


class TestCheckResult:

  def test_str_passed(self):
    result = CheckResult(name='Has table', pattern='x = {}', passed=True)

    assert str(result) == 'Has table: PASSED'

  def test_str_failed(self):
    result = CheckResult(name='Has table', pattern='x = {}', passed=False)

    assert str(result) == 'Has table: FAILED'

  def test_frozen(self):
    """Results cannot be mutated after creation."""
    result = CheckResult(name='a', pattern='b', passed=True)

    with pytest.raises(dataclasses.FrozenInstanceError):
      result.passed = False  # type: ignore[misc]


class TestFactories:

  def test_make_result_copies_entry(self):
    entry = ChecklistEntry('Has table', 'x = {}')

    result = make_result(entry, False)

    assert result == CheckResult('Has table', 'x = {}', False)
    assert make_result(entry, True).passed

  def test_status_label(self):
    assert status_label(True) == 'PASSED'
    assert status_label(False) == 'FAILED'
