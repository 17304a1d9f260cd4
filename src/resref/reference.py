"""The ``ResourceReference`` value type, its builder and parser."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field, validator

from utils.logging import get_logger

from .grammar import RR_PREFIX, is_valid, match, split_properties


LOGGER = get_logger(__name__)


class InvalidFormatError(ValueError):
    """Raised when a string does not follow the ``rr://`` grammar."""

    def __init__(self, candidate: Any) -> None:
        super().__init__(f"Invalid resource reference: {candidate!r}")
        self.candidate = candidate


class ResourceReference(BaseModel):
    """Immutable reference of the form ``rr://<ENV>/<app>/<customer>/<props...>``.

    Instances built directly or through :class:`Builder` are not checked
    against the grammar; only :meth:`of` / :func:`parse` are. Environment is
    always stored uppercase and application lowercase.
    """

    environment: str
    application: str
    customer: str
    properties: Tuple[str, ...] = Field(default_factory=tuple)

    class Config:
        frozen = True

    @validator("environment")
    def normalise_environment(cls, value: str) -> str:
        return value.upper()

    @validator("application")
    def normalise_application(cls, value: str) -> str:
        return value.lower()

    @classmethod
    def of(cls, candidate: Any) -> "ResourceReference":
        """Parse ``candidate``, raising :class:`InvalidFormatError` on mismatch."""

        found = match(candidate)
        if found is None:
            LOGGER.debug("Rejected resource reference %r", candidate)
            raise InvalidFormatError(candidate)
        builder = Builder(found.group("application"), found.group("environment"), found.group("customer"))
        builder.with_properties(*split_properties(found.group("properties")))
        return builder.build()

    @property
    def value(self) -> str:
        """Canonical string form."""

        parts = [self.environment, self.application, self.customer, *self.properties]
        return RR_PREFIX + "/".join(parts)

    def is_canonical(self) -> bool:
        """Return ``True`` if :attr:`value` itself satisfies the grammar."""

        return is_valid(self.value)

    def as_record(self) -> Dict[str, Any]:
        """Return a JSON-serialisable mapping representing this reference."""

        data = self.model_dump()
        data["properties"] = list(self.properties)
        data["value"] = self.value
        return data

    def jsonl(self) -> str:
        return json.dumps(self.as_record(), ensure_ascii=False)

    def __str__(self) -> str:
        return self.value


class Builder:
    """Mutable accumulator for :class:`ResourceReference` instances."""

    def __init__(self, application: str, environment: str, customer: str) -> None:
        self.application = application
        self.environment = environment
        self.customer = customer
        self.properties: List[str] = []

    def with_properties(self, *properties: str) -> "Builder":
        self.properties.extend(properties)
        return self

    def add_property(self, prop: str) -> "Builder":
        self.properties.append(prop)
        return self

    def build(self) -> ResourceReference:
        return ResourceReference(
            environment=self.environment,
            application=self.application,
            customer=self.customer,
            properties=tuple(self.properties),
        )


def parse(candidate: Any) -> ResourceReference:
    """Parse ``candidate`` into a :class:`ResourceReference`."""

    return ResourceReference.of(candidate)
