#!/usr/bin/env python3
from typing import Optional


class VerifierError(Exception):
    """Base class for verifier errors"""

    def __init__(self, message: str, line: int = 0):
        self.message = message
        self.line = line
        super().__init__(self._format_error())

    def _format_error(self) -> str:
        if self.line > 0:
            return f"Error at line {self.line}: {self.message}"
        return f"Error: {self.message}"


class ProfileError(VerifierError):
    """No usable architecture profile"""

    def __init__(self, message: str, profile: Optional[str] = None):
        self.profile = profile
        super().__init__(message)


class UsageError(VerifierError):
    """Command-line misuse"""
    pass
