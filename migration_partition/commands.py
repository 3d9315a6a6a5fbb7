#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""
Partition command descriptors.

Each command describes exactly one partition operation. Commands are attached
to a Blueprint and compiled by the grammar; they validate their own required
fields on construction and are immutable afterwards.
"""
from dataclasses import dataclass
from dataclasses import fields
from typing import ClassVar
from typing import Optional
from typing import Sequence
from typing import Union

from .exceptions import MissingPartitionFieldError


PARTITION_RANGE = "range"
PARTITION_LIST = "list"
PARTITION_HASH = "hash"

PARTITION_STRATEGIES = (PARTITION_RANGE, PARTITION_LIST, PARTITION_HASH)

# pg_partitioned_table.partstrat
STRATEGY_CODES = {
    PARTITION_RANGE: "r",
    PARTITION_LIST: "l",
    PARTITION_HASH: "h",
}

PartitionKey = Union[str, Sequence[str]]


def _check_text(command, name, value):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingPartitionFieldError(command, name)


def _check_int(command, name, value, minimum):
    if value is None:
        raise MissingPartitionFieldError(command, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise MissingPartitionFieldError(command, name, reason="must be an integer")
    if value < minimum:
        raise MissingPartitionFieldError(command, name, reason=f"must be >= {minimum}")


def _check_key(command, value):
    if isinstance(value, str) or value is None:
        _check_text(command, "partition_key", value)
        return
    columns = list(value)
    if not columns:
        raise MissingPartitionFieldError(command, "partition_key")
    for column in columns:
        _check_text(command, "partition_key", column)


class PartitionCommand:
    """Common behavior of the partition command descriptors."""

    name: ClassVar[str] = ""
    strategy: ClassVar[Optional[str]] = None

    # field name -> minimum allowed integer value
    int_fields: ClassVar[dict] = {}

    def __post_init__(self):
        for fld in fields(self):
            value = getattr(self, fld.name)
            if fld.name == "partition_key":
                _check_key(self.name, value)
            elif fld.name in self.int_fields:
                _check_int(self.name, fld.name, value, self.int_fields[fld.name])
            else:
                _check_text(self.name, fld.name, value)

    @property
    def key_columns(self):
        """The partition key as a comma-separated column list."""
        key = getattr(self, "partition_key", None)
        if key is None or isinstance(key, str):
            return key
        return ", ".join(key)


@dataclass(frozen=True)
class CreateRangePartitioned(PartitionCommand):
    name: ClassVar[str] = "create_range_partitioned"
    strategy: ClassVar[Optional[str]] = PARTITION_RANGE

    partition_key: PartitionKey


@dataclass(frozen=True)
class CreateRangePartition(PartitionCommand):
    name: ClassVar[str] = "create_range_partition"
    strategy: ClassVar[Optional[str]] = PARTITION_RANGE

    suffix: str
    start_value: str
    end_value: str


@dataclass(frozen=True)
class AttachRangePartition(PartitionCommand):
    name: ClassVar[str] = "attach_range_partition"
    strategy: ClassVar[Optional[str]] = PARTITION_RANGE

    partition_table: str
    start_value: str
    end_value: str


@dataclass(frozen=True)
class CreateListPartitioned(PartitionCommand):
    name: ClassVar[str] = "create_list_partitioned"
    strategy: ClassVar[Optional[str]] = PARTITION_LIST

    partition_key: PartitionKey


@dataclass(frozen=True)
class CreateListPartition(PartitionCommand):
    name: ClassVar[str] = "create_list_partition"
    strategy: ClassVar[Optional[str]] = PARTITION_LIST

    suffix: str
    list_value: str


@dataclass(frozen=True)
class AttachListPartition(PartitionCommand):
    name: ClassVar[str] = "attach_list_partition"
    strategy: ClassVar[Optional[str]] = PARTITION_LIST

    partition_table: str
    list_value: str


@dataclass(frozen=True)
class CreateHashPartitioned(PartitionCommand):
    name: ClassVar[str] = "create_hash_partitioned"
    strategy: ClassVar[Optional[str]] = PARTITION_HASH

    partition_key: PartitionKey


@dataclass(frozen=True)
class CreateHashPartition(PartitionCommand):
    name: ClassVar[str] = "create_hash_partition"
    strategy: ClassVar[Optional[str]] = PARTITION_HASH
    int_fields: ClassVar[dict] = {"modulus": 1, "remainder": 0}

    suffix: str
    modulus: int
    remainder: int


@dataclass(frozen=True)
class AttachHashPartition(PartitionCommand):
    name: ClassVar[str] = "attach_hash_partition"
    strategy: ClassVar[Optional[str]] = PARTITION_HASH
    int_fields: ClassVar[dict] = {"modulus": 1, "remainder": 0}

    partition_table: str
    modulus: int
    remainder: int


@dataclass(frozen=True)
class DetachPartition(PartitionCommand):
    name: ClassVar[str] = "detach_partition"

    partition_table: str
