"""
Struct walker: populates a dataclass instance from an environment snapshot.

Traversal is depth-first in field declaration order. For every field:

    1. If the field currently holds a dataclass instance (not a Ref),
       recurse into it first.
    2. Untagged fields are left alone.
    3. Tagged fields that cannot be assigned (leading underscore, or any
       field of a frozen dataclass) raise UnexportedFieldError.
    4. The primary key is looked up; when missing the default literal is
       used; with neither, the field is left alone.
    5. The field annotation is resolved (only now, and only for this
       field) and the raw string is coerced to it and assigned.

The first error aborts the walk. Fields assigned before it keep their new
values; there is no rollback.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Mapping

from envstruct.errors import InvalidValueError, UnexportedFieldError
from envstruct.hints import is_record, resolve_field_type
from envstruct.setter import coerce
from envstruct.snapshot import dotenv_snapshot, environ_snapshot
from envstruct.tags import field_tag_string, parse_tag

logger = logging.getLogger(__name__)


def unmarshal(v: Any) -> None:
    """
    Populate v from the process environment.

    Raises:
        InvalidValueError: If v is not a dataclass instance
        UnexportedFieldError: If a tagged field cannot be assigned
        UnsupportedTypeError: If a tagged field's type has no coercion rule
        CoercionError: If a value does not parse as its field's type
    """
    unmarshal_env(environ_snapshot(), v)


def unmarshal_dotenv(v: Any, path: str | Path = ".env", *, override: bool = False) -> None:
    """Populate v from the process environment merged with a .env file."""
    unmarshal_env(dotenv_snapshot(path, override=override), v)


def unmarshal_env(snapshot: Mapping[str, str], v: Any) -> None:
    """
    Populate v from an explicit snapshot.

    The snapshot is copied; the caller's mapping is never modified.
    """
    _check_target(v)
    _walk(dict(snapshot), v, "")


def _check_target(v: Any) -> None:
    if v is None or not is_record(v):
        raise InvalidValueError(v)


def _walk(snapshot: Dict[str, str], record: Any, prefix: str) -> None:
    record_type = type(record)
    frozen = record_type.__dataclass_params__.frozen

    for f in fields(record):
        path = prefix + f.name

        nested = getattr(record, f.name, None)
        if is_record(nested):
            _walk(snapshot, nested, path + ".")

        tag = field_tag_string(f)
        if not tag:
            continue

        if frozen or f.name.startswith("_"):
            raise UnexportedFieldError(path)

        env_tag = parse_tag(tag)
        if env_tag.key in snapshot:
            raw = snapshot[env_tag.key]
            logger.debug("Setting %s from $%s", path, env_tag.key)
        elif env_tag.has_default:
            raw = env_tag.default
            logger.debug("Setting %s from default (%s unset)", path, env_tag.key)
        else:
            logger.debug("Skipping %s: %s unset and no default", path, env_tag.key)
            continue

        field_type = resolve_field_type(record_type, f, path)
        setattr(record, f.name, coerce(field_type, raw, path))

        snapshot.pop(tag, None)
