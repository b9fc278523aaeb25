"""A password check: the password is the first ten Fibonacci numbers as characters."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, Sequence

PASSWORD_LENGTH = 10


def _fibonacci() -> Iterator[int]:
    a, b = 1, 1
    while True:
        yield a
        a, b = b, a + b


def check_password(password: str) -> bool:
    """True when the password is exactly the expected ten character codes."""
    if len(password) != PASSWORD_LENGTH:
        return False
    return all(ord(char) == code for char, code in zip(password, _fibonacci()))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print OK or KO for the password given as the only argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("challenge: Enter password", file=sys.stderr)
        return 1
    print("OK" if check_password(args[0]) else "KO")
    return 0