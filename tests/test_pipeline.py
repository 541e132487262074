import logging

import pytest

from conftest import X86_BLOCK, messages, scan
from simdverify.core import (
    X86_64_PROFILE, Diagnostic, DiagnosticReporter, VerifierConfig, iter_safe_region, verify_file, verify_lines,
    verify_source,
)
from simdverify.utils.errors import ProfileError


def test_diagnostic_format():
    assert Diagnostic('prediction.asm', 12, 'Illegal operand: rax').format() == 'prediction.asm: 12: Illegal operand: rax'


def test_reporter_counts_and_emits():
    emitted = []
    reporter = DiagnosticReporter('a.asm', sink=emitted.append)
    assert reporter.exit_status() == 0
    reporter.error(3, 'Illegal instruction: jmp')
    reporter.error(9, "Expected critical macro 'epilog'")
    assert emitted == ['a.asm: 3: Illegal instruction: jmp', "a.asm: 9: Expected critical macro 'epilog'"]
    assert reporter.error_count == 2
    assert reporter.exit_status() == 1


def test_reporter_writes_to_stderr_by_default(capsys):
    DiagnosticReporter('a.asm').error(1, 'Illegal operand: [rsp]')
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == 'a.asm: 1: Illegal operand: [rsp]\n'


def test_safe_region_keeps_physical_line_numbers():
    lines = ['jmp rax', 'call rax ; #begin-safe-code', 'mov xmm0, xmm1', '#begin-safe-code', 'epilog']
    assert list(iter_safe_region(lines)) == [(3, 'mov xmm0, xmm1'), (4, '#begin-safe-code'), (5, 'epilog')]


def test_code_before_sentinel_is_ignored():
    lines = ['bits 64', 'jmp rax', '%define foo 1', '; #begin-safe-code'] + X86_BLOCK
    emitted = []
    result = verify_lines(lines, X86_64_PROFILE, 'a.asm', sink=emitted.append)
    assert emitted == []
    assert result.sentinel_found
    assert result.lines_scanned == len(X86_BLOCK)


def test_missing_sentinel_verifies_nothing(caplog):
    with caplog.at_level(logging.WARNING):
        result = verify_lines(['jmp rax', 'label: junk'], X86_64_PROFILE, 'a.asm', sink=lambda text: None)
    assert result.error_count == 0
    assert not result.sentinel_found
    assert result.lines_scanned == 0
    assert 'marker found' in caplog.text


def test_custom_sentinel():
    config = VerifierConfig(sentinel='; SAFE')
    result = verify_source('jmp rax\n; SAFE\njmp rax\n', X86_64_PROFILE, config=config, sink=lambda text: None)
    assert messages(result) == ['Illegal instruction: jmp', 'Illegal operand: rax']
    assert result.diagnostics[0].line == 3


def test_end_of_file_diagnostic_uses_last_line():
    result, _ = scan(X86_BLOCK[:-1] + ['', '   ; trailing comment'], X86_64_PROFILE)
    assert messages(result) == ["Expected critical macro 'epilog'"]
    assert result.diagnostics[0].line == len(X86_BLOCK) + 2


def test_verify_file(tmp_path):
    path = tmp_path / 'prediction.asm'
    path.write_text('\n'.join(['default rel', '; #begin-safe-code'] + X86_BLOCK[:-1]) + '\n', encoding='utf-8')
    emitted = []
    result = verify_file(path, X86_64_PROFILE, sink=emitted.append)
    assert emitted == [f"{path}: 8: Expected critical macro 'epilog'"]
    assert result.exit_status == 1
    assert result.source_path == str(path)


@pytest.mark.parametrize('call', [
    lambda: verify_lines([], None),
    lambda: verify_source('', None),
    lambda: verify_file('does-not-matter.asm', None),
])
def test_missing_profile_fails_fast(call):
    with pytest.raises(ProfileError):
        call()
