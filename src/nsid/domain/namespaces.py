"""Namespace tag validation.

A namespace names the entity type an identifier belongs to (``user``,
``payment``, ...).  It is 1-10 lowercase ASCII letters, so it can never
contain the ``_`` separator of the canonical string form.
"""

from __future__ import annotations

import re

from nsid.domain.errors import InvalidNamespace

NAMESPACE_MAX_LENGTH = 10

# [a-z] is ASCII-only; fullmatch rejects a trailing newline that ``$`` would allow.
NAMESPACE_PATTERN: re.Pattern[str] = re.compile(r"[a-z]{1,%d}" % NAMESPACE_MAX_LENGTH)


def is_valid_namespace(namespace: object) -> bool:
    """Return True if *namespace* is 1-10 lowercase ASCII letters."""
    if not isinstance(namespace, str):
        return False
    return NAMESPACE_PATTERN.fullmatch(namespace) is not None


def validate_namespace(namespace: object) -> str:
    """Return *namespace* unchanged, or raise :class:`InvalidNamespace`."""
    if not is_valid_namespace(namespace):
        raise InvalidNamespace(namespace)
    assert isinstance(namespace, str)
    return namespace
