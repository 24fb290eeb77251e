"""Topic handle helpers."""

import re

# Topic handles are the service's article ids
TopicHandle = str

_UUID_PATTERN = re.compile(
    r"^\{?[A-Fa-f0-9]{8}-[A-Fa-f0-9]{4}-[A-Fa-f0-9]{4}-[A-Fa-f0-9]{4}-[A-Fa-f0-9]{12}\}?$"
)


def is_valid_uuid(value: str) -> bool:
    """
    Check whether a topic handle is UUID-formatted.

    Braced forms such as ``{2b38cb35-...}`` are accepted. The client never
    applies this check itself; the service stays authoritative.
    """
    return isinstance(value, str) and _UUID_PATTERN.match(value) is not None
