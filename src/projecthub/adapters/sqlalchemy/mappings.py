"""SQLAlchemy mapping metadata for the projecthub domain model."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import cache
from typing import Any, cast

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Dialect,
    Integer,
    String,
    Table,
    Text,
    TypeDecorator,
    orm,
)
from sqlalchemy.orm import configure_mappers

from projecthub.domain.model import Contribution, Project

log = logging.getLogger(__name__)


class ContributionListType(TypeDecorator[list[Contribution]]):
    """Store a list of contributions as a JSON array of their wire payloads."""

    impl = JSON
    cache_ok = True

    def process_bind_param(
        self, value: list[Contribution] | None, dialect: Dialect
    ) -> list[dict[str, object]] | None:
        _ = dialect
        if value is None:
            return None
        return [contribution.as_payload() for contribution in value]

    def process_result_value(self, value: object, dialect: Dialect) -> list[Contribution]:
        _ = dialect
        if not isinstance(value, list):
            return []
        items = cast(list[Any], value)
        contributions: list[Contribution] = []
        for item in items:
            if isinstance(item, Mapping):
                contributions.append(Contribution.from_payload(cast(Mapping[str, object], item)))
        return contributions


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

project_table = Table(
    "project",
    mapper_registry.metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String, nullable=False, default=""),
    Column("description", Text, nullable=False, default=""),
    Column("visible", Boolean, nullable=False, default=True),
    Column("order_index", Integer, nullable=True),
    Column("additional_info", JSON, nullable=False),
    Column("repository_patterns", JSON, nullable=False),
    Column("contributions", ContributionListType, nullable=False),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(Project, project_table)

    configure_mappers()
    return mapper_registry
