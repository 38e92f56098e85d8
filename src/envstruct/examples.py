"""
Example configuration record for a small web service.

Used by demo_unmarshal.py and the tests. Shows nested records, optional
fields, defaults and durations together.
"""
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

from envstruct.tags import env_field
from envstruct.types import Int32, Ref


@dataclass
class DatabaseConfig:
    host: str = env_field("DB_HOST,default=localhost", default="")
    port: Int32 = env_field("DB_PORT,default=5432", default=Int32(0))
    user: str = env_field("DB_USER", default="")
    password: Optional[str] = env_field("DB_PASSWORD", default=None)
    connect_timeout: timedelta = env_field("DB_CONNECT_TIMEOUT,default=5s", default=timedelta(0))


@dataclass
class ServiceConfig:
    name: str = env_field("SERVICE_NAME,default=example", default="")
    debug: bool = env_field("DEBUG,default=false", default=False)
    workers: int = env_field("WORKERS,default=4", default=0)
    request_timeout: timedelta = env_field("REQUEST_TIMEOUT,default=30s", default=timedelta(0))
    sample_rate: float = env_field("SAMPLE_RATE,default=1.0", default=0.0)
    banner: Optional[Ref[str]] = env_field("BANNER", default=None)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)

    # Not read from the environment
    started_by: str = ""


def build_example_config() -> ServiceConfig:
    return ServiceConfig()
