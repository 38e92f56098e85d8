"""
Per-field annotation resolution.

Under `from __future__ import annotations` every dataclass field type is a
string. Resolving all of them at once (typing.get_type_hints) fails on any
name the defining module cannot see at runtime: types imported only under
TYPE_CHECKING, or record classes defined inside a function. Fields are
therefore resolved one at a time, and only when a type is actually needed.
"""

from __future__ import annotations

import sys
from dataclasses import MISSING, Field, is_dataclass
from typing import Any, Optional

from envstruct.errors import UnsupportedTypeError
from envstruct.types import Ref


def resolve_field_type(record_type: type, f: Field, field_name: Optional[str] = None) -> Any:
    """
    Return the evaluated type of a dataclass field.

    String annotations are evaluated against the record's module globals
    and class namespace, the same namespaces get_type_hints uses.

    Raises:
        UnsupportedTypeError: If the annotation cannot be evaluated; the
            underlying NameError/AttributeError is chained
    """
    tp = f.type
    if not isinstance(tp, str):
        return tp

    module = sys.modules.get(record_type.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = dict(vars(record_type))
    localns.setdefault(record_type.__name__, record_type)
    try:
        return eval(tp, globalns, localns)
    except (NameError, AttributeError) as e:
        raise UnsupportedTypeError(field_name or f.name, tp) from e


def is_record(value: Any) -> bool:
    """True for a dataclass instance that is not a Ref."""
    return is_dataclass(value) and not isinstance(value, (type, Ref))


def is_record_type(tp: Any) -> bool:
    """True for a dataclass class that is not Ref."""
    return isinstance(tp, type) and is_dataclass(tp) and not issubclass(tp, Ref)


def nested_record_type(record_type: type, f: Field) -> Optional[type]:
    """
    Record class held by a field, judged without an instance.

    A default_factory that builds a record answers directly; otherwise the
    annotation is resolved. An annotation that cannot be resolved means
    the field is not followed.
    """
    if f.default_factory is not MISSING and is_record_type(f.default_factory):
        return f.default_factory
    try:
        tp = resolve_field_type(record_type, f)
    except UnsupportedTypeError:
        return None
    return tp if is_record_type(tp) else None
