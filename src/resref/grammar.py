"""Grammar of ``rr://`` resource reference strings."""
from __future__ import annotations

import re
from typing import Any, Optional, Tuple

RR_PREFIX = "rr://"
MAX_PROPERTIES = 6

ENVIRONMENT_PATTERN = r"[A-Z]{2,}"
APPLICATION_PATTERN = r"[a-z]{2,}"
CUSTOMER_PATTERN = r"[A-Za-z0-9_-]{3,}"
PROPERTY_PATTERN = r"[A-Za-z0-9-]{2,}"

# rr://<env>/<app>/<customer>/<prop1>/.../<prop6>
RR_URI_PATTERN = re.compile(
    re.escape(RR_PREFIX)
    + rf"(?P<environment>{ENVIRONMENT_PATTERN})"
    + rf"/(?P<application>{APPLICATION_PATTERN})"
    + rf"/(?P<customer>{CUSTOMER_PATTERN})"
    + rf"(?P<properties>(?:/{PROPERTY_PATTERN}){{0,{MAX_PROPERTIES}}})"
)


def match(candidate: Any) -> Optional[re.Match]:
    """Return the full-string match for ``candidate`` or ``None``."""

    if not isinstance(candidate, str):
        return None
    return RR_URI_PATTERN.fullmatch(candidate)


def is_valid(candidate: Any) -> bool:
    """Return ``True`` if ``candidate`` is a well-formed resource reference.

    Never raises: ``None`` and non-string values are simply invalid.
    """

    return match(candidate) is not None


def split_properties(group: str) -> Tuple[str, ...]:
    """Split the captured properties group into its segments."""

    rest = group[1:] if group.startswith("/") else group
    if not rest:
        return ()
    return tuple(rest.split("/"))
