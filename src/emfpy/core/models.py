"""Core domain models for EMF documents."""

from dataclasses import dataclass, field
from enum import Enum


class Unit(str, Enum):
    """CloudWatch metric units accepted in a metric directive."""

    SECONDS = "Seconds"
    MICROSECONDS = "Microseconds"
    MILLISECONDS = "Milliseconds"
    BYTES = "Bytes"
    KILOBYTES = "Kilobytes"
    MEGABYTES = "Megabytes"
    GIGABYTES = "Gigabytes"
    TERABYTES = "Terabytes"
    BITS = "Bits"
    KILOBITS = "Kilobits"
    MEGABITS = "Megabits"
    GIGABITS = "Gigabits"
    TERABITS = "Terabits"
    PERCENT = "Percent"
    COUNT = "Count"
    BYTES_SECOND = "Bytes/Second"
    KILOBYTES_SECOND = "Kilobytes/Second"
    MEGABYTES_SECOND = "Megabytes/Second"
    GIGABYTES_SECOND = "Gigabytes/Second"
    TERABYTES_SECOND = "Terabytes/Second"
    BITS_SECOND = "Bits/Second"
    KILOBITS_SECOND = "Kilobits/Second"
    MEGABITS_SECOND = "Megabits/Second"
    GIGABITS_SECOND = "Gigabits/Second"
    TERABITS_SECOND = "Terabits/Second"
    COUNT_SECOND = "Count/Second"
    NONE = "None"

    @classmethod
    def parse(cls, value: "Unit | str") -> "Unit":
        """Return the Unit for a member or its wire string.

        Raises:
            ValueError: If the string is not a known unit.
        """
        if isinstance(value, cls):
            return value
        return cls(value)


@dataclass
class DimensionSet:
    """An ordered combination of dimension names and values.

    Attributes:
        records: Dimension name to dimension value, in insertion order.
    """

    records: dict[str, str] = field(default_factory=dict)

    def add_dimension(self, key: str, value: str) -> None:
        """Set a dimension, keeping the position of an existing key."""
        self.records[key] = value

    def dimension_keys(self) -> list[str]:
        """Dimension names in insertion order."""
        return list(self.records)

    def dimension_records(self) -> dict[str, str]:
        """Copy of the name to value mapping."""
        return dict(self.records)

    def merge(self, other: "DimensionSet") -> "DimensionSet":
        """Return a new set holding this set's dimensions followed by other's.

        Values from ``other`` win when both sets share a key. Neither operand
        is modified.
        """
        return DimensionSet({**self.records, **other.records})

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class MetricDefinition:
    """A named metric, its unit and the values recorded for it.

    Attributes:
        name: Metric name (e.g., Latency).
        unit: Unit reported in the directive.
        values: Recorded values in call order.
    """

    name: str
    unit: Unit = Unit.NONE
    values: list[float] = field(default_factory=list)

    def add_value(self, value: float) -> None:
        self.values.append(value)

    def to_directive_entry(self) -> dict[str, str]:
        return {"Name": self.name, "Unit": self.unit.value}
