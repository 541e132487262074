#!/usr/bin/env python3
import os


class Colors:
    """Presentation settings shared by the terminal helpers"""
    # Compact, unstyled output (also SIMDVERIFY_MINIMAL_UI=1)
    MINIMAL = False
    # Show info/debug lines
    VERBOSE = False

    # rich style names
    ERROR = 'red'
    INFO = 'yellow'
    ACCENT = 'cyan'
    HEADER = 'bold magenta'


def is_minimal() -> bool:
    # Environment override wins over the class flag
    env = os.environ.get('SIMDVERIFY_MINIMAL_UI')
    if env is not None:
        return env.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(getattr(Colors, 'MINIMAL', False))


def is_verbose() -> bool:
    return bool(getattr(Colors, 'VERBOSE', False))


def styled(text: str, style: str) -> str:
    """Wrap text in rich markup unless minimal output is active"""
    if is_minimal():
        return text
    return f"[{style}]{text}[/{style}]"
