from typing import Literal

from pydantic import BaseModel, Field

from noticehub.domain.entities import RoleType


class StorageRules(BaseModel):
    key_prefix: str = "noticehub_"
    backend: Literal["sqlite", "memory"] = "sqlite"
    path: str = "noticehub.db"


class RbacRules(BaseModel):
    roles: dict[str, list[str]]


class SeedAccount(BaseModel):
    role: RoleType
    name: str
    email: str
    password: str


class SeedNotice(BaseModel):
    title: str
    body: str
    published: bool = True


class SeedRules(BaseModel):
    enabled_if_empty: bool = True
    accounts: list[SeedAccount] = Field(default_factory=list)
    notice: SeedNotice | None = None


class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class Rules(BaseModel):
    storage: StorageRules = Field(default_factory=StorageRules)
    rbac: RbacRules
    seed: SeedRules = Field(default_factory=SeedRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
