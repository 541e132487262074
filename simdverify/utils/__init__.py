"""Terminal output and error types"""
from .errors import VerifierError, ProfileError, UsageError

__all__ = ['VerifierError', 'ProfileError', 'UsageError']
