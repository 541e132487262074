from dataclasses import dataclass
from typing import Callable, List, Optional

from ..utils import term

DiagnosticSink = Callable[[str], None]


@dataclass
class Diagnostic:
    source_path: str
    line: int
    message: str

    def format(self) -> str:
        return f"{self.source_path}: {self.line}: {self.message}"

    def __str__(self):
        return self.format()


class DiagnosticReporter:
    """Formats, emits and counts the diagnostics of one scan"""

    def __init__(self, source_path: str, sink: Optional[DiagnosticSink] = None):
        self.source_path = source_path
        self.sink = sink if sink is not None else term.print_diagnostic
        self.diagnostics: List[Diagnostic] = []
        self.error_count = 0

    def error(self, line: int, message: str) -> Diagnostic:
        diag = Diagnostic(self.source_path, line, message)
        self.sink(diag.format())
        self.diagnostics.append(diag)
        self.error_count += 1
        return diag

    def has_errors(self) -> bool:
        return self.error_count > 0

    def exit_status(self) -> int:
        return 1 if self.has_errors() else 0
