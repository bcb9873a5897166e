"""Query string builder"""

from typing import Any, Dict
from urllib.parse import urlencode


class QueryStringBuilder:
    """
    Accumulates query parameters and renders them as ``?k=v&...``

    List and tuple values repeat the key once per item.

    Example:
        >>> builder = QueryStringBuilder()
        >>> builder.add("tag", ["a", "b"])
        >>> builder.add("page", 2)
        >>> builder.build()
        '?tag=a&tag=b&page=2'
    """

    def __init__(self) -> None:
        self._params: Dict[str, Any] = {}

    def add(self, name: str, value: Any) -> None:
        self._params[name] = value

    def remove(self, name: str) -> None:
        self._params.pop(name, None)

    def build(self) -> str:
        if not self._params:
            return ""
        pairs = []
        for name, value in self._params.items():
            if isinstance(value, (list, tuple)):
                pairs.extend((name, item) for item in value)
            else:
                pairs.append((name, value))
        return "?" + urlencode(pairs)
