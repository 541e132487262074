import re
from typing import List

# A run of word characters, or any single other non-space character
_TOKEN_RE = re.compile(r'\w+|[^\w\s]', re.ASCII)


def tokenize_line(line: str, comment_sigil: str) -> List[str]:
    """Split one source line into tokens, dropping the comment and whitespace.

    Identifiers and numbers come out whole; punctuation is one token per
    character. A blank or comment-only line gives an empty list.
    """
    cut = line.find(comment_sigil)
    if cut != -1:
        line = line[:cut]
    return _TOKEN_RE.findall(line)


class LineTokenizer:
    """Tokenizer bound to a profile's comment sigil"""

    def __init__(self, comment_sigil: str):
        self.comment_sigil = comment_sigil

    def tokenize(self, line: str) -> List[str]:
        return tokenize_line(line, self.comment_sigil)
