"""Request parameter merging and encoding helpers."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

Bucket = Union[str, List[str], None]


def merge_parameters(defaults: Optional[Dict[str, Any]],
                     explicit: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge two parameter maps; keys in ``explicit`` always win."""
    merged = dict(defaults or {})
    merged.update(explicit or {})
    return merged


def clean_parameters(parameters: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Prepare a parameter map for the query string.

    None values are dropped and booleans become "true"/"false". Lists are
    left alone so requests encodes them as repeated keys
    (bucket=description&bucket=urls).
    """
    cleaned = {}
    for key, value in (parameters or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned


@dataclass
class SearchOptions:
    """Recognized keys for genre/search, plus an open-ended extension map."""
    
    name: Optional[str] = None
    bucket: Bucket = None
    limit: Optional[bool] = None  # restrict to the given id-space/catalog
    results: Optional[int] = None
    start: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    
    def to_parameters(self) -> Dict[str, Any]:
        named = {
            "name": self.name,
            "bucket": self.bucket,
            "limit": self.limit,
            "results": self.results,
            "start": self.start,
        }
        return merge_parameters(self.extra,
                                {k: v for k, v in named.items() if v is not None})
