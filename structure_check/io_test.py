import pandas as pd
import pytest

from structure_check import io
from structure_check.validation.base import CheckResult
from structure_check.validation.report import ValidationReport


def _report(passed: bool = True) -> ValidationReport:
  return ValidationReport.from_results(
      [CheckResult('Has table', 'x = {}', passed)], title='T')


class TestLoad:

  def test_reads_whole_file(self, spell_compiler_file, spell_compiler_source):
    assert io.load(spell_compiler_file) == spell_compiler_source

  def test_missing_file(self, tmp_path):
    """Missing files raise ArtifactReadError, an IOError."""
    with pytest.raises(IOError, match='Cannot read'):
      io.load(tmp_path / 'missing.lua')

  def test_missing_file_chains_cause(self, tmp_path):
    with pytest.raises(io.ArtifactReadError) as exc_info:
      io.load(tmp_path / 'missing.lua')

    assert isinstance(exc_info.value.__cause__, FileNotFoundError)

  def test_bad_encoding(self, tmp_path):
    path = tmp_path / 'binary.lua'
    path.write_bytes(b'\xff\xfe\xfa')

    with pytest.raises(io.ArtifactReadError, match='Cannot decode'):
      io.load(path)

  def test_directory(self, tmp_path):
    with pytest.raises(io.ArtifactReadError):
      io.load(tmp_path)


class TestEmit:

  def test_prints_and_writes(self, tmp_path, capsys):
    out = tmp_path / 'results.txt'
    report = _report()

    io.emit(report, out)

    assert capsys.readouterr().out == report.render()
    assert out.read_text(encoding='utf-8') == report.render_file_report()

  def test_overwrites_previous_report(self, tmp_path):
    out = tmp_path / 'results.txt'
    out.write_text('stale content that is longer than the new report' * 10)

    io.write_report(_report(False), out)

    assert out.read_text(encoding='utf-8') == _report(
        False).render_file_report()

  def test_creates_parent_dirs(self, tmp_path):
    out = tmp_path / 'nested' / 'dir' / 'results.txt'

    io.write_report(_report(), out)

    assert out.exists()

  def test_csv_export(self, tmp_path):
    out = tmp_path / 'results.txt'
    csv_path = tmp_path / 'results.csv'

    io.emit(_report(False), out, csv_path=csv_path)

    df = pd.read_csv(csv_path)
    assert df['name'].tolist() == ['Has table']
    assert df['pattern'].tolist() == ['x = {}']
    assert df['passed'].tolist() == [False]
