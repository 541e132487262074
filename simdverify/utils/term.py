from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .colors import Colors, is_minimal, is_verbose, styled

console = Console()
error_console = Console(stderr=True)


def print_diagnostic(text: str):
    """Write one diagnostic line to stderr exactly as formatted"""
    error_console.print(text, markup=False, highlight=False, soft_wrap=True)


def print_error(message: str):
    if is_minimal():
        error_console.print(f"[ERROR] {message}", markup=False, highlight=False, soft_wrap=True)
        return
    error_console.print(f"{styled('Error:', Colors.ERROR)} {escape(message)}", highlight=False, soft_wrap=True)


def print_info(message: str):
    # info lines only with --verbose
    if not is_verbose():
        return
    if is_minimal():
        console.print(f"[INFO] {message}", markup=False, highlight=False, soft_wrap=True)
        return
    console.print(f"{styled('Info:', Colors.INFO)} {escape(message)}", highlight=False, soft_wrap=True)


def print_summary(error_count: int):
    """Trailing count line after the diagnostics of a failed run"""
    text = f"{error_count} error(s)"
    if is_minimal():
        error_console.print(text, markup=False, highlight=False, soft_wrap=True)
        return
    error_console.print(styled(text, f"bold {Colors.ERROR}"), highlight=False, soft_wrap=True)


def print_profile(profile):
    """Render the allowed vocabulary of a profile as a table"""
    rows = [
        ('directive sigil', profile.directive_sigil),
        ('comment sigil', profile.comment_sigil),
        ('macro argument sigil', profile.macro_argument_sigil),
        ('directives', _join(profile.allowed_directives)),
        ('instructions', _join(profile.allowed_instructions)),
        ('memory locations', _join(profile.allowed_memory_locations)),
        ('operands', _join(profile.allowed_operands)),
        ('macro arguments', _join(profile.allowed_macro_arguments)),
        ('data types', _join(profile.allowed_data_types) or '-'),
        ('other sigils', _join(profile.other_allowed_sigils)),
        ('critical macros', ' -> '.join('|'.join(stage) for stage in profile.critical_macros)),
    ]
    if is_minimal():
        for name, value in rows:
            console.print(f"{name}: {value}", markup=False, highlight=False, soft_wrap=True)
        return
    table = Table(title=f"Profile {profile.name}", header_style=Colors.HEADER)
    table.add_column("Category", style=Colors.ACCENT, no_wrap=True)
    table.add_column("Allowed")
    for name, value in rows:
        table.add_row(name, escape(value))
    console.print(table)


def _join(values) -> str:
    return ' '.join(sorted(values, key=_natural_key))


def _natural_key(value: str):
    # xmm2 before xmm10
    head = value.rstrip('0123456789')
    tail = value[len(head):]
    return (head, int(tail) if tail else -1)
