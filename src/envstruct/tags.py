"""
Field tag parsing.

A tag is the string stored under metadata["env"] on a dataclass field:

    KEY[,KEY2,...][,default=LITERAL]

Segments are split on ",". A segment containing "=" is a directive; only
"default" (any case) is understood, others are reserved and ignored. Every
other segment is a lookup key.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

TAG_NAME = "env"

DEFAULT_DIRECTIVE = "default"


@dataclass(frozen=True)
class FieldTag:
    """
    Parsed form of a field tag.

    Properties:
        key:
            Primary lookup key (the first key segment)

        fallbacks:
            Remaining key segments, in declared order. Parsed and kept,
            but not consulted during lookup.

        default:
            Default literal, or None when no default directive is present.
            An empty default ("default=") is a real default of "".
    """

    key: str
    fallbacks: Tuple[str, ...] = ()
    default: Optional[str] = None

    @property
    def keys(self) -> Tuple[str, ...]:
        return (self.key,) + self.fallbacks

    @property
    def has_default(self) -> bool:
        return self.default is not None


def parse_tag(tag: str) -> FieldTag:
    """
    Parse a tag string into a FieldTag.

    Examples:
        parse_tag("HOME")                     -> key="HOME"
        parse_tag("PORT,default=8080")        -> key="PORT", default="8080"
        parse_tag("A,B,default=k=v")          -> key="A", fallbacks=("B",), default="k=v"
    """
    keys = []
    default = None
    for segment in tag.split(","):
        if "=" in segment:
            name, literal = segment.split("=", 1)
            if name.lower() == DEFAULT_DIRECTIVE:
                default = literal
            continue
        keys.append(segment)

    if not keys:
        return FieldTag(key="", default=default)
    return FieldTag(key=keys[0], fallbacks=tuple(keys[1:]), default=default)


def env_field(tag: str, **kwargs: Any):
    """
    Declare a dataclass field bound to an environment variable.

    Accepts the same keyword arguments as dataclasses.field(); any
    metadata passed in is kept alongside the tag.

        @dataclass
        class Config:
            home: str = env_field("HOME", default="")
            port: int = env_field("PORT,default=8080", default=0)
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_NAME] = tag
    return field(metadata=metadata, **kwargs)


def field_tag_string(f) -> str:
    """Raw tag string of a dataclass field ("" when untagged)."""
    return f.metadata.get(TAG_NAME, "") or ""
