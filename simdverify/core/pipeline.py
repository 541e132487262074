import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set, Tuple, Union

from ..utils.errors import ProfileError
from .checker import PolicyChecker
from .diagnostics import Diagnostic, DiagnosticReporter, DiagnosticSink
from .lexer import LineTokenizer
from .profiles import ArchitectureProfile
from .tokens import LineKind, SourceLine

logger = logging.getLogger(__name__)

DEFAULT_SENTINEL = '#begin-safe-code'


@dataclass
class VerifierConfig:
    sentinel: str = DEFAULT_SENTINEL
    encoding: str = 'utf-8'
    verbose: bool = False


@dataclass
class VerificationResult:
    source_path: str
    profile: ArchitectureProfile
    diagnostics: List[Diagnostic] = field(default_factory=list)
    lines_scanned: int = 0
    sentinel_found: bool = False
    macro_names: Set[str] = field(default_factory=set)

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)

    @property
    def exit_status(self) -> int:
        return 1 if self.diagnostics else 0


class _SafeRegion:
    """Iterates the lines after the sentinel while counting every physical line"""

    def __init__(self, lines: Iterable[str], sentinel: str):
        self._lines = lines
        self.sentinel = sentinel
        self.sentinel_found = False
        self.last_line = 0

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        for number, text in enumerate(self._lines, 1):
            self.last_line = number
            if self.sentinel_found:
                yield number, text
            elif self.sentinel in text:
                logger.debug("safe-code region starts after line %d", number)
                self.sentinel_found = True


def iter_safe_region(lines: Iterable[str], sentinel: str = DEFAULT_SENTINEL) -> Iterator[Tuple[int, str]]:
    """Yield (line number, text) for every line after the first sentinel line"""
    return iter(_SafeRegion(lines, sentinel))


def verify_lines(lines: Iterable[str], profile: Optional[ArchitectureProfile], source_path: str = '<stdin>',
                 config: Optional[VerifierConfig] = None,
                 sink: Optional[DiagnosticSink] = None) -> VerificationResult:
    if profile is None:
        raise ProfileError("no architecture profile selected")
    config = config or VerifierConfig()
    reporter = DiagnosticReporter(source_path, sink)
    checker = PolicyChecker(profile, reporter)
    tokenizer = LineTokenizer(profile.comment_sigil)
    region = _SafeRegion(lines, config.sentinel)
    result = VerificationResult(source_path, profile)

    logger.debug("verifying %s with profile %s", source_path, profile.name)
    source_lines = [SourceLine(number, text, tokenizer.tokenize(text)) for number, text in region]
    result.lines_scanned = len(source_lines)

    # declarations first: a macro may be invoked above its declaration
    for line in source_lines:
        checker.declare_macros(line.tokens)
    if checker.macro_names:
        logger.debug("declared macros: %s", ', '.join(sorted(checker.macro_names)))

    for line in source_lines:
        if not line.tokens:
            continue
        kind = checker.check_line(line.number, line.tokens)
        if kind is LineKind.LABEL:
            logger.debug("block %s at line %d", line.tokens[0], line.number)

    if not region.sentinel_found:
        logger.warning("%s: no '%s' marker found, nothing verified", source_path, config.sentinel)
    checker.finish(region.last_line)

    result.diagnostics = list(reporter.diagnostics)
    result.sentinel_found = region.sentinel_found
    result.macro_names = set(checker.macro_names)
    logger.debug("%s: %d line(s) scanned, %d error(s)", source_path, result.lines_scanned, result.error_count)
    return result


def verify_source(text: str, profile: Optional[ArchitectureProfile], source_path: str = '<stdin>',
                  config: Optional[VerifierConfig] = None,
                  sink: Optional[DiagnosticSink] = None) -> VerificationResult:
    return verify_lines(text.splitlines(), profile, source_path, config, sink)


def verify_file(path: Union[str, Path], profile: Optional[ArchitectureProfile],
                config: Optional[VerifierConfig] = None,
                sink: Optional[DiagnosticSink] = None) -> VerificationResult:
    if profile is None:
        raise ProfileError("no architecture profile selected")
    config = config or VerifierConfig()
    with open(path, 'r', encoding=config.encoding, errors='replace') as f:
        return verify_lines(f, profile, str(path), config, sink)
