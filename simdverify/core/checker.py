"""
Policy checker: validates each tokenized line against an architecture profile
and drives the critical macro tracker.
"""
import logging
import re
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Set

from ..utils.errors import ProfileError
from .critical import CriticalMacroTracker
from .diagnostics import DiagnosticReporter
from .profiles import ArchitectureProfile
from .tokens import LineKind, classify_line

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r'^0x[0-9a-fA-F]+$')
_DEC_RE = re.compile(r'^[0-9]+$')

MISSING = 'end of line'


@dataclass
class ScanContext:
    """Mutable state of one scan, threaded through every line"""
    reporter: DiagnosticReporter
    tracker: CriticalMacroTracker
    macro_names: Set[str] = field(default_factory=set)
    line_number: int = 0

    def error(self, message: str):
        self.reporter.error(self.line_number, message)


class PolicyChecker:
    def __init__(self, profile: Optional[ArchitectureProfile], reporter: DiagnosticReporter):
        if profile is None:
            raise ProfileError("no architecture profile selected")
        self.profile = profile
        self.context = ScanContext(reporter, CriticalMacroTracker(profile.critical_macros))

    @property
    def macro_names(self) -> Set[str]:
        return self.context.macro_names

    def check_line(self, line_number: int, tokens: List[str]) -> LineKind:
        """Validate one line; returns how it was classified"""
        self.context.line_number = line_number
        kind = classify_line(tokens, self.profile.directive_sigil)
        if kind is LineKind.DIRECTIVE:
            self._check_directive(tokens)
        elif kind is LineKind.LABEL:
            self._check_label(tokens)
        elif kind is LineKind.INSTRUCTION:
            self._check_instruction(tokens)
        return kind

    def declare_macros(self, tokens: List[str]):
        """Record a macro declaration ahead of the validation pass"""
        if classify_line(tokens, self.profile.directive_sigil) is not LineKind.DIRECTIVE or len(tokens) < 3:
            return
        if tokens[1] == self.profile.macro_directive:
            self.context.macro_names.add(tokens[2])

    def finish(self, line_number: int):
        """End of input: the last block must have completed its sequence"""
        self.context.line_number = line_number
        message = self.context.tracker.finish()
        if message:
            self.context.error(message)

    def _check_directive(self, tokens: List[str]):
        directive = tokens[1] if len(tokens) > 1 else None
        if directive not in self.profile.allowed_directives:
            self.context.error(f"Illegal directive: {directive or MISSING}")
            return
        if directive == self.profile.macro_directive and len(tokens) > 2:
            logger.debug("line %d: macro %s declared", self.context.line_number, tokens[2])
            self.context.macro_names.add(tokens[2])

    def _check_label(self, tokens: List[str]):
        if len(tokens) > 2:
            self.context.error("Put all labels on a separate line")
        message = self.context.tracker.enter_label()
        if message:
            self.context.error(message)

    def _check_instruction(self, tokens: List[str]):
        pending = deque(tokens)
        instruction = pending.popleft()
        if self.context.tracker.consume(instruction):
            return

        if instruction not in self.profile.allowed_instructions and instruction not in self.context.macro_names:
            self.context.error(f"Illegal instruction: {instruction}")

        if self.profile.has_data_types:
            self._check_data_types(pending)

        while pending:
            self._check_operand(pending)

    def _check_data_types(self, pending: Deque[str]):
        # vadd.i16, vcvt.f32.s32
        while pending and pending[0] == '.':
            pending.popleft()
            data_type = pending.popleft() if pending else None
            if data_type not in self.profile.allowed_data_types:
                self.context.error(f"Illegal data type: {data_type or MISSING}")

    def _check_operand(self, pending: Deque[str]):
        token = pending.popleft()
        if token in self.profile.allowed_operands:
            return
        if token in self.profile.other_allowed_sigils or token == ',':
            return
        if _HEX_RE.match(token) or _DEC_RE.match(token):
            return
        if token == self.profile.macro_argument_sigil:
            argument = pending.popleft() if pending else None
            if argument not in self.profile.allowed_macro_arguments:
                self.context.error(f"Illegal macro argument: {argument or MISSING}")
            return
        if token == '[':
            self._check_memory_location(pending)
            return
        self.context.error(f"Illegal operand: {token}")

    def _check_memory_location(self, pending: Deque[str]):
        location = pending.popleft() if pending else None
        if location not in self.profile.allowed_memory_locations:
            self.context.error(f"Illegal memory location: {location or MISSING}")
        closing = pending.popleft() if pending else None
        if closing != ']':
            self.context.error(f"Illegal memory location: found token {location or MISSING}")
