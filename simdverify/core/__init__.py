"""Core package re-exports for the verifier"""
from .profiles import Architecture, ArchitectureProfile, X86_64_PROFILE, ARM_PROFILE, PROFILES, get_profile, available_profiles
from .lexer import LineTokenizer, tokenize_line
from .tokens import LineKind, SourceLine, classify_line
from .critical import CriticalMacroTracker
from .diagnostics import Diagnostic, DiagnosticReporter
from .checker import ScanContext, PolicyChecker
from .pipeline import DEFAULT_SENTINEL, VerifierConfig, VerificationResult, iter_safe_region, verify_lines, verify_source, verify_file

__all__ = [
    'Architecture','ArchitectureProfile','X86_64_PROFILE','ARM_PROFILE','PROFILES','get_profile','available_profiles',
    'LineTokenizer','tokenize_line',
    'LineKind','SourceLine','classify_line',
    'CriticalMacroTracker',
    'Diagnostic','DiagnosticReporter',
    'ScanContext','PolicyChecker',
    'DEFAULT_SENTINEL','VerifierConfig','VerificationResult','iter_safe_region','verify_lines','verify_source','verify_file'
]
