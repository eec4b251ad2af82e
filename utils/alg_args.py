"""
Scanning of raw command-line tokens for the ``-alg <algorithm> <filePath>`` triple.
"""
from dataclasses import dataclass
from typing import Sequence

ALG_FLAG = "-alg"


class InvalidArgumentsError(ValueError):
    """Raised when ``-alg`` is not followed by both an algorithm and a file path."""


@dataclass(frozen=True)
class Invocation:
    """Algorithm and file path requested for a single run."""

    algorithm: str = ""
    file_path: str = ""


def parse_alg_args(tokens: Sequence[str]) -> Invocation:
    """
    Find the first ``-alg`` token and take the next two tokens as algorithm and file path.

    All other tokens are skipped. Without ``-alg`` both fields are empty.

    Args:
        tokens (Sequence[str]): Command-line tokens, excluding the program name.

    Returns:
        Invocation: The requested algorithm and file path.

    Raises:
        InvalidArgumentsError: If ``-alg`` lacks a following algorithm or file path.
    """
    index = 0
    while index < len(tokens):
        if tokens[index] == ALG_FLAG:
            remaining = len(tokens) - index - 1
            if remaining < 1:
                raise InvalidArgumentsError(f"Missing algorithm after {ALG_FLAG}")
            if remaining < 2:
                raise InvalidArgumentsError(f"Missing file path after {ALG_FLAG} {tokens[index + 1]}")
            return Invocation(algorithm=tokens[index + 1], file_path=tokens[index + 2])
        index += 1
    return Invocation()
