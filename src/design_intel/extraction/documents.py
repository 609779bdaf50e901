# ABOUTME: Read-only access to loosely structured source JSON documents
# ABOUTME: Every lookup states whether absence is tolerated by returning an explicit empty value

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from design_intel.extraction.errors import SourceDocumentError

Key = str | int


class SourceDocument:
    """Immutable view over one parsed JSON value.

    Lookups walk a path of object keys (or list indices). A step that hits a
    missing key or a value of the wrong shape yields the accessor's empty
    value instead of raising:

    - ``get`` -> ``None``
    - ``section`` -> empty document
    - ``items`` / ``mapping`` / ``strings`` -> empty list
    - ``text`` -> the given default (``""``)
    """

    __slots__ = ("_value", "name")

    def __init__(self, value: Any, name: str = "<inline>"):
        self._value = value
        self.name = name

    @property
    def value(self) -> Any:
        return self._value

    def __bool__(self) -> bool:
        return bool(self._value)

    def __repr__(self) -> str:
        return f"SourceDocument({self.name!r})"

    def get(self, *path: Key) -> Any | None:
        """Raw value at ``path``, or ``None`` when any step is absent."""
        current = self._value
        for key in path:
            if isinstance(current, dict) and isinstance(key, str):
                current = current.get(key)
            elif isinstance(current, list) and isinstance(key, int) and -len(current) <= key < len(current):
                current = current[key]
            else:
                return None
        return current

    def has(self, *path: Key) -> bool:
        """True when the value at ``path`` is set.

        Null, false, zero and the empty string read as unset. Objects and
        arrays are set even when empty.
        """
        value = self.get(*path)
        if isinstance(value, (dict, list)):
            return True
        return bool(value)

    def section(self, *path: Key) -> "SourceDocument":
        """Nested object at ``path``; an empty document when absent or not an object."""
        value = self.get(*path)
        return SourceDocument(value if isinstance(value, dict) else {}, self.name)

    def items(self, *path: Key) -> list["SourceDocument"]:
        """Elements of the list at ``path``; empty when absent or not a list."""
        value = self.get(*path)
        if not isinstance(value, list):
            return []
        return [SourceDocument(item, self.name) for item in value]

    def mapping(self, *path: Key) -> list[tuple[str, "SourceDocument"]]:
        """Key/value pairs of the object at ``path`` in document order."""
        value = self.get(*path)
        if not isinstance(value, dict):
            return []
        return [(key, SourceDocument(item, self.name)) for key, item in value.items()]

    def keys(self, *path: Key) -> list[str]:
        value = self.get(*path)
        return list(value) if isinstance(value, dict) else []

    def text(self, *path: Key, default: str = "") -> str:
        """Value at ``path`` rendered as text; ``default`` when absent."""
        value = self.get(*path)
        if value is None:
            return default
        return render_text(value)

    def strings(self, *path: Key) -> list[str]:
        """List at ``path`` rendered element-wise as text, skipping nulls."""
        value = self.get(*path)
        if not isinstance(value, list):
            return []
        return [render_text(item) for item in value if item is not None]

    def joined(self, *path: Key, sep: str = ", ") -> str:
        return sep.join(self.strings(*path))

    def __iter__(self) -> Iterator["SourceDocument"]:
        return iter(self.items())


def render_text(value: Any) -> str:
    """Render a JSON scalar the way it reads in prose."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if item is None else render_text(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def read_document(path: Path) -> SourceDocument:
    """Parse one required source document.

    Raises:
        SourceDocumentError: If the file is missing, unreadable or not valid JSON
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceDocumentError(path, str(e)) from e

    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SourceDocumentError(path, f"invalid JSON: {e}") from e

    return SourceDocument(value, path.name)
