"""
Scanner - splits chord text into interval tokens.

Whitespace and the configured separators end a token, except between a
vector opening and closing bracket, where spaces and commas separate
monzo components instead:

    "3:2400.&11/3|1\\5;[-1,1> [0 0 1>-4/1"
    -> ["3", "2400.", "11/3", "1\\5", "[-1,1>", "[0 0 1>-4/1"]
"""

from __future__ import annotations

from chuk_mcp_xen.config import DEFAULT_NOTATION_CONFIG, NotationConfig
from chuk_mcp_xen.constants import ErrorMessages
from chuk_mcp_xen.exceptions import MalformedTokenError


def split_tokens(text: str, config: NotationConfig | None = None) -> list[str]:
    """
    Split text into interval tokens.

    Args:
        text: Free text with zero or more intervals
        config: Notation configuration (separators, vector brackets)

    Returns:
        Tokens in source order, without empty fields

    Raises:
        MalformedTokenError: If a vector bracket is never closed
    """
    config = config or DEFAULT_NOTATION_CONFIG
    tokens: list[str] = []
    current: list[str] = []
    in_vector = False

    for char in text:
        if in_vector:
            current.append(char)
            if char == config.vector_close:
                in_vector = False
        elif char == config.vector_open:
            in_vector = True
            current.append(char)
        elif char.isspace() or char in config.separators:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if in_vector:
        token = "".join(current)
        raise MalformedTokenError(
            ErrorMessages.UNTERMINATED_VECTOR.format(token=token, close=config.vector_close),
            token=token,
            expected="monzo",
        )
    if current:
        tokens.append("".join(current))
    return tokens
