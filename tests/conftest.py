import pytest

from simdverify.core import verify_lines
from simdverify.utils.colors import Colors

SENTINEL_LINE = '; #begin-safe-code'

X86_BLOCK = [
    'predict_average:',
    '    prolog',
    '    loop_start',
    '    movdqu xmm0, [src]      ; load',
    '    paddb xmm0, xmm1',
    '    loop_end',
    '    epilog',
]

ARM_BLOCK = [
    'predict_average:',
    '    prolog',
    '    loop_start',
    '    vld1.8 {d0}, [src]      @ load',
    '    vadd.i8 d0, d0, d1',
    '    loop_end_stride',
    '    epilog',
]


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    monkeypatch.setattr(Colors, 'MINIMAL', False)
    monkeypatch.setattr(Colors, 'VERBOSE', False)
    monkeypatch.delenv('SIMDVERIFY_MINIMAL_UI', raising=False)


def scan(lines, profile, sentinel_line=SENTINEL_LINE, source_path='test.asm'):
    """Verify lines placed after the sentinel; returns (result, emitted lines)"""
    emitted = []
    result = verify_lines([sentinel_line] + list(lines), profile, source_path, sink=emitted.append)
    return result, emitted


def messages(result):
    return [diag.message for diag in result.diagnostics]
