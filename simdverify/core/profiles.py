"""
Architecture profiles: the allowed vocabulary for one target instruction set.

A profile is pure data. The checker is generic and reads everything it needs
(sigils, whitelists, critical macro stages) from the profile it is given.
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional, Tuple

from ..utils.errors import ProfileError

_WORD = re.compile(r'^\w+$')

DEFAULT_CRITICAL_MACROS: Tuple[Tuple[str, ...], ...] = (
    ('prolog',),
    ('loop_start',),
    ('loop_end', 'loop_end_stride'),
    ('epilog',),
)


class Architecture(Enum):
    """Supported target architectures"""
    X86_64 = "x86_64"
    ARM = "arm"


@dataclass(frozen=True)
class ArchitectureProfile:
    name: str
    directive_sigil: str
    comment_sigil: str
    macro_argument_sigil: str
    allowed_directives: FrozenSet[str]
    allowed_instructions: FrozenSet[str]
    allowed_memory_locations: FrozenSet[str]
    allowed_operands: FrozenSet[str]
    allowed_macro_arguments: FrozenSet[str]
    allowed_data_types: FrozenSet[str] = frozenset()
    other_allowed_sigils: FrozenSet[str] = frozenset()
    macro_directive: str = 'macro'
    critical_macros: Tuple[Tuple[str, ...], ...] = field(default=DEFAULT_CRITICAL_MACROS)

    def __post_init__(self):
        for label in ('directive_sigil', 'comment_sigil', 'macro_argument_sigil'):
            sigil = getattr(self, label)
            if len(sigil) != 1 or _WORD.match(sigil) or sigil.isspace():
                raise ProfileError(f"{label} must be one non-word character, got {sigil!r}", self.name)
        for label in ('allowed_directives', 'allowed_instructions', 'allowed_memory_locations',
                      'allowed_operands', 'allowed_macro_arguments', 'allowed_data_types'):
            for entry in getattr(self, label):
                if not _WORD.match(entry) or entry != entry.lower():
                    raise ProfileError(f"{label} entry {entry!r} is not a lower-case identifier", self.name)
        for sigil in self.other_allowed_sigils:
            if len(sigil) != 1 or _WORD.match(sigil) or sigil.isspace():
                raise ProfileError(f"other_allowed_sigils entry {sigil!r} is not punctuation", self.name)
        if not self.critical_macros or not all(self.critical_macros):
            raise ProfileError("critical_macros needs at least one non-empty stage", self.name)
        if self.macro_directive not in self.allowed_directives:
            raise ProfileError(f"macro directive {self.macro_directive!r} is not an allowed directive", self.name)

    @property
    def has_data_types(self) -> bool:
        return bool(self.allowed_data_types)


def _words(*chunks: str) -> FrozenSet[str]:
    return frozenset(word for chunk in chunks for word in chunk.split())


def _numbered(prefix: str, count: int) -> FrozenSet[str]:
    return frozenset(f"{prefix}{i}" for i in range(count))


X86_64_PROFILE = ArchitectureProfile(
    name=Architecture.X86_64.value,
    directive_sigil='%',
    comment_sigil=';',
    macro_argument_sigil='%',
    allowed_directives=_words('endmacro macro'),
    allowed_instructions=_words(
        'and mov movd movddup movdqa movdqu movq or pabsw paddb paddw',
        'pand pcmpgtw pinsrq pmaxsw pmovzxbw por pshufb psrlw vpandn',
        'vpminsw vpshufb vpslldq vpsrldq vpsubw xorps',
    ),
    allowed_memory_locations=_words('dest prev src'),
    allowed_operands=_words('r11 r11d') | _numbered('xmm', 16),
    # NASM positional macro parameters: %1 .. %9
    allowed_macro_arguments=frozenset('0123456789'),
    other_allowed_sigils=frozenset({',', '%'}),
)

ARM_PROFILE = ArchitectureProfile(
    name=Architecture.ARM.value,
    directive_sigil='.',
    comment_sigil='@',
    macro_argument_sigil='\\',
    allowed_directives=_words('endm macro'),
    allowed_instructions=_words(
        'vld1 vst1 vmov vdup vext vrev64 vzip vuzp vtbl',
        'vadd vsub vabd vabs vmax vmin vpadd vhadd',
        'vand vorr veor vbic vbsl vcgt vcge vceq',
        'vshl vshr vsli vsri vmovl vmovn vqmovun',
        'mov add sub',
    ),
    allowed_memory_locations=_words('dest prev src'),
    allowed_operands=_numbered('d', 32) | _numbered('q', 16) | _words('r12'),
    allowed_macro_arguments=_words('dest prev src stride'),
    allowed_data_types=_words(
        '8 16 32 64',
        'i8 i16 i32 i64 s8 s16 s32 s64 u8 u16 u32 u64',
        'f32 p8',
    ),
    other_allowed_sigils=frozenset({',', '#', '{', '}', '-', '!'}),
)

PROFILES: Dict[Architecture, ArchitectureProfile] = {
    Architecture.X86_64: X86_64_PROFILE,
    Architecture.ARM: ARM_PROFILE,
}

_ALIASES: Dict[str, Architecture] = {
    'x86_64': Architecture.X86_64,
    'x86-64': Architecture.X86_64,
    'amd64': Architecture.X86_64,
    'avx': Architecture.X86_64,
    'arm': Architecture.ARM,
    'neon': Architecture.ARM,
    'armv7': Architecture.ARM,
}


def get_profile(name: Optional[str]) -> ArchitectureProfile:
    """Resolve an architecture name (or alias) to its profile"""
    if isinstance(name, Architecture):
        return PROFILES[name]
    if not name:
        raise ProfileError("no architecture selected")
    arch = _ALIASES.get(name.strip().lower())
    if arch is None:
        raise ProfileError(f"unknown architecture: {name}", name)
    return PROFILES[arch]


def available_profiles() -> Iterable[str]:
    return [arch.value for arch in Architecture]
