"""
Document model for collected INI properties.

The parser itself never builds a tree; these models are what
:func:`spanini.core.loader.collect` produces when a caller wants one.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .values import ValueKind


class PropertySpec(BaseModel):
    """
    One ``key = value`` line.

    Attributes:
        section: Name of the enclosing section
        key: Property key
        kind: Kind of the decoded value
        value: Decoded value as a plain Python object
        line: Line number of the key (1-indexed)
    """

    section: str
    key: str
    kind: ValueKind
    value: str | float | bool | None = None
    line: int = 0

    model_config = ConfigDict(frozen=True)


class IniDocument(BaseModel):
    """Properties of a document in source order. Duplicate keys are kept."""

    properties: list[PropertySpec] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def sections(self) -> list[str]:
        """Names of sections holding at least one property, in first-seen order."""
        return list(dict.fromkeys(prop.section for prop in self.properties))

    def in_section(self, section: str) -> list[PropertySpec]:
        return [prop for prop in self.properties if prop.section == section]

    def get(self, section: str, key: str) -> list[str | float | bool | None]:
        """Every value recorded for ``key`` in ``section``, in source order."""
        return [prop.value for prop in self.in_section(section) if prop.key == key]
