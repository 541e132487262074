from dataclasses import dataclass, field
from enum import Enum
from typing import List

LABEL_MARKER = ':'


class LineKind(Enum):
    EMPTY = "empty"
    DIRECTIVE = "directive"
    LABEL = "label"
    INSTRUCTION = "instruction"


@dataclass
class SourceLine:
    """One physical line of the safe-code region"""
    number: int
    text: str
    tokens: List[str] = field(default_factory=list)


def classify_line(tokens: List[str], directive_sigil: str) -> LineKind:
    if not tokens:
        return LineKind.EMPTY
    if tokens[0] == directive_sigil:
        return LineKind.DIRECTIVE
    if len(tokens) > 1 and tokens[1] == LABEL_MARKER:
        return LineKind.LABEL
    return LineKind.INSTRUCTION
