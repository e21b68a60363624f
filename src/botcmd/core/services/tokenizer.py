"""
Splits command text into quote-aware tokens.
"""

from __future__ import annotations

import re

_TOKEN_PATTERN = re.compile(r'"([^"]*)"|(\S+)')


def tokenize(text: str) -> list[str]:
    """Split ``text`` on whitespace, keeping ``"..."`` spans as one token.

    Quotes around a span are stripped and its inner whitespace is kept.
    The first token, the command name itself, is dropped.

    >>> tokenize('!cmd a "b c" d')
    ['a', 'b c', 'd']
    """
    tokens = [
        quoted if quoted is not None else bare
        for quoted, bare in (
            (m.group(1), m.group(2)) for m in _TOKEN_PATTERN.finditer(text)
        )
    ]
    return tokens[1:]
