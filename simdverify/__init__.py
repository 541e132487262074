"""Static whitelist verifier for hand-written SIMD assembly"""
from .core import (
    Architecture, ArchitectureProfile, get_profile, VerifierConfig, VerificationResult,
    verify_file, verify_lines, verify_source,
)
from .utils.errors import VerifierError, ProfileError, UsageError

__version__ = "0.1.0"

__all__ = [
    'Architecture', 'ArchitectureProfile', 'get_profile', 'VerifierConfig', 'VerificationResult',
    'verify_file', 'verify_lines', 'verify_source',
    'VerifierError', 'ProfileError', 'UsageError',
]
