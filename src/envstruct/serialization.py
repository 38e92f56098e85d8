"""
Serialization helpers for populated configuration records.

Turns a record tree into plain dicts, JSON or YAML, e.g. to print the
effective configuration at startup. Durations are written as duration
literals, so the output can be fed back in as environment values.
"""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from datetime import timedelta
from typing import Any, Dict

import yaml

from envstruct.duration import format_duration
from envstruct.hints import nested_record_type
from envstruct.tags import FieldTag, field_tag_string, parse_tag
from envstruct.types import Ref


def value_to_plain(value: Any) -> Any:
    if isinstance(value, Ref):
        return value_to_plain(value.value)
    if is_dataclass(value) and not isinstance(value, type):
        return record_to_dict(value)
    if isinstance(value, timedelta):
        return format_duration(value)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    return value


def record_to_dict(record: Any) -> Dict[str, Any]:
    return {f.name: value_to_plain(getattr(record, f.name)) for f in fields(record)}


def record_to_json(record: Any) -> str:
    return json.dumps(record_to_dict(record), sort_keys=True)


def record_to_yaml(record: Any) -> str:
    return yaml.safe_dump(record_to_dict(record))


def record_env_keys(record_type: type) -> Dict[str, FieldTag]:
    """
    Map dotted field paths to their parsed tags, for a record type.

    Nested record types are followed; untagged fields are omitted. Field
    annotations are only consulted to find nested records, one field at a
    time, so names visible only to type checkers do not get in the way.

    Example:
        {"home": FieldTag(key="HOME"), "jenkins.workspace": FieldTag(key="WORKSPACE")}
    """
    out: Dict[str, FieldTag] = {}
    for f in fields(record_type):
        nested_type = nested_record_type(record_type, f)
        if nested_type is not None:
            for path, tag in record_env_keys(nested_type).items():
                out[f"{f.name}.{path}"] = tag
        tag = field_tag_string(f)
        if tag:
            out[f.name] = parse_tag(tag)
    return out
