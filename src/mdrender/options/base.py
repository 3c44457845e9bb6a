#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared behavior for frozen option records.

Option records are immutable; callers derive variants with
:meth:`CloneFrozenMixin.create_updated` and build them from decoded JSON with
:meth:`CloneFrozenMixin.from_mapping`, which drops keys the record does not
know so that newer callers can talk to older libraries.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin for frozen dataclass option records."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a copy with some fields replaced.

        The copy goes through ``__init__`` again, so field validation runs on
        the new values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New record with the given fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """Return the names of the record's fields."""
        return frozenset(f.name for f in fields(cls))  # type: ignore[arg-type]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Build a record from a mapping, ignoring unknown keys.

        Parameters
        ----------
        data : Mapping[str, Any]
            Field values keyed by field name

        Returns
        -------
        Self
            New record; fields missing from ``data`` take their defaults

        """
        known = cls.field_names()
        unknown = sorted(key for key in data if key not in known)
        if unknown:
            logger.debug("Ignoring unknown %s keys: %s", cls.__name__, ", ".join(map(str, unknown)))
        return cls(**{key: value for key, value in data.items() if key in known})
