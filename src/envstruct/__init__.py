"""
envstruct: environment variables -> typed dataclass configuration.

Fields opt in with a tag under metadata["env"]:

    @dataclass
    class Config:
        home: str = env_field("HOME", default="")
        port: int = env_field("PORT,default=8080", default=0)

    cfg = Config()
    unmarshal(cfg)

The package does no logging configuration of its own; records are emitted
on the "envstruct" logger hierarchy at DEBUG level.
"""

from envstruct.errors import (
    CoercionError,
    EnvError,
    InvalidValueError,
    UnexportedFieldError,
    UnsupportedTypeError,
)
from envstruct.snapshot import build_snapshot, dotenv_snapshot, environ_snapshot
from envstruct.tags import TAG_NAME, FieldTag, env_field, parse_tag
from envstruct.types import Float32, Float64, Int8, Int16, Int32, Int64, Ref
from envstruct.walker import unmarshal, unmarshal_dotenv, unmarshal_env

__version__ = "0.1.0"

__all__ = [
    "CoercionError",
    "EnvError",
    "FieldTag",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "InvalidValueError",
    "Ref",
    "TAG_NAME",
    "UnexportedFieldError",
    "UnsupportedTypeError",
    "build_snapshot",
    "dotenv_snapshot",
    "env_field",
    "environ_snapshot",
    "parse_tag",
    "unmarshal",
    "unmarshal_dotenv",
    "unmarshal_env",
]
