"""JSON encoder for EMF documents."""

import json
from collections.abc import Iterable, Mapping
from typing import Any

from emfpy.core.errors import EncodingFailure

_EMPTY_CONTAINERS = (list, tuple, dict)


def prune_empty(members: Mapping[str, Any]) -> dict[str, Any]:
    """Drop members whose value is an empty list, tuple or dict.

    Args:
        members: Flattened top-level fields of a document.

    Returns:
        New dict with the remaining members in their original order.
    """
    return {
        key: value
        for key, value in members.items()
        if not (isinstance(value, _EMPTY_CONTAINERS) and not value)
    }


def encode_document(document: Mapping[str, Any]) -> str:
    """Encode one document as compact JSON.

    Non-finite floats are written as ``NaN`` / ``Infinity``.

    Args:
        document: The document, ``_aws`` member included.

    Returns:
        JSON string without a trailing newline.

    Raises:
        EncodingFailure: If a value is cyclic or of an unsupported type.
    """
    try:
        return json.dumps(document, separators=(",", ":"), allow_nan=True)
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodingFailure(f"cannot encode EMF document: {exc}") from exc


def encode_documents(documents: Iterable[Mapping[str, Any]]) -> str:
    """Encode documents to newline-delimited JSON.

    Args:
        documents: An iterable of documents.

    Returns:
        NDJSON string with one document per line.
        Empty string if no documents.
    """
    lines = [encode_document(document) for document in documents]

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
