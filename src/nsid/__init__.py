"""nsid — namespaced, time-sortable unique identifiers."""

from nsid.domain.errors import (
    IdentifierError,
    InvalidNamespace,
    InvalidPayloadLength,
    InvalidTimestamp,
    MalformedIdentifier,
    NamespaceMismatch,
)
from nsid.domain.ids import (
    Identifier,
    compare,
    create,
    equals,
    factory,
    from_bytes,
    from_parts,
    is_after,
    is_before,
    is_namespace,
    is_valid,
    namespaced,
    parse,
    to_bytes,
)
from nsid.domain.ksuid import Ksuid
from nsid.domain.namespaces import is_valid_namespace, validate_namespace

__version__ = "0.1.0"

__all__ = [
    "Identifier",
    "IdentifierError",
    "InvalidNamespace",
    "InvalidPayloadLength",
    "InvalidTimestamp",
    "Ksuid",
    "MalformedIdentifier",
    "NamespaceMismatch",
    "__version__",
    "compare",
    "create",
    "equals",
    "factory",
    "from_bytes",
    "from_parts",
    "is_after",
    "is_before",
    "is_namespace",
    "is_valid",
    "is_valid_namespace",
    "namespaced",
    "parse",
    "to_bytes",
    "validate_namespace",
]
