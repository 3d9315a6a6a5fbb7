#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""Table definitions handed to partition DDL callbacks."""
from .commands import PartitionCommand
from .exceptions import PartitionConstructionError


class Default:
    """
    Column default rendered into create table DDL.

    None renders as null. Objects exposing default_constraint() (such as a
    sequence definition) render through it; anything else is inlined with str().
    """

    def __init__(self, value):
        self.value = value

    def sql(self):
        if self.value is None:
            return "null"
        if hasattr(self.value, "default_constraint"):
            return self.value.default_constraint()
        return str(self.value)

    __str__ = sql

    def __repr__(self):
        return f"Default({self.value!r})"


class ColumnDefinition:
    """
    A column of a table being created.
    Params:
        name (str) : column name
        data_type (str) : database data type
        nullable (bool) : False adds a not null constraint (default is True)
        default (Default/any) : default value; wrapped in Default if needed (default is None = no default)
        primary (bool) : column is the primary key (default is False)
        auto_increment (bool) : column is backed by a sequence (default is False)
        starting_value (int) : restart value for the backing sequence (default is None = leave the sequence alone)
    """

    def __init__(
        self,
        name,
        data_type,
        nullable=True,
        default=None,
        primary=False,
        auto_increment=False,
        starting_value=None,
    ):
        self.name = name
        self.data_type = data_type
        self.nullable = nullable
        if default is not None and not isinstance(default, Default):
            default = Default(default)
        self.default = default
        self.primary = primary
        self.auto_increment = auto_increment
        self.starting_value = starting_value

    def __repr__(self):
        return f"ColumnDefinition({self.name!r}, {self.data_type!r})"


class Blueprint:
    """
    Definition of a table and the single partition command to apply to it.

    The builder creates a Blueprint, hands it to the caller's callback to
    collect column definitions, then attaches the partition command.
    """

    def __init__(self, table, prefix="", callback=None):
        self.table = table
        self.prefix = prefix or ""
        self.columns = []
        self.command = None

        if callback is not None:
            callback(self)

    def __repr__(self):
        return f"<Blueprint {self.get_table()} command={self.command!r}>"

    def get_table(self):
        return self.prefix + self.table

    def set_command(self, command):
        if not isinstance(command, PartitionCommand):
            raise TypeError(f"Expected a PartitionCommand, got {type(command).__name__}")
        if self.command is not None:
            raise PartitionConstructionError(
                f"Table {self.get_table()} already has a {self.command.name} command; "
                + f"cannot also apply {command.name}"
            )
        self.command = command
        return command

    def add_column(self, column):
        self.columns.append(column)
        return column

    def auto_increment_columns(self):
        return [col for col in self.columns if col.auto_increment]

    def column(self, name, data_type, **options):
        return self.add_column(ColumnDefinition(name, data_type, **options))

    def increments(self, name="id", starting_value=None, primary=False):
        """
        Add a serial column.

        Not a primary key by default: a primary key on a partitioned table must
        include every partition key column, so pass primary=True only when the
        table is partitioned on this column alone.
        """
        return self.column(
            name, "serial", nullable=False, primary=primary, auto_increment=True, starting_value=starting_value
        )

    def big_increments(self, name="id", starting_value=None, primary=False):
        """Add a bigserial column. See increments() for the primary key caveat."""
        return self.column(
            name, "bigserial", nullable=False, primary=primary, auto_increment=True, starting_value=starting_value
        )

    def string(self, name, length=255, **options):
        return self.column(name, f"varchar({length})", **options)

    def text(self, name, **options):
        return self.column(name, "text", **options)

    def integer(self, name, **options):
        return self.column(name, "integer", **options)

    def big_integer(self, name, **options):
        return self.column(name, "bigint", **options)

    def date(self, name, **options):
        return self.column(name, "date", **options)

    def timestamp(self, name, timezone=True, **options):
        return self.column(name, "timestamp with time zone" if timezone else "timestamp", **options)

    def numeric(self, name, precision=33, scale=15, **options):
        return self.column(name, f"numeric({precision}, {scale})", **options)

    def jsonb(self, name, **options):
        return self.column(name, "jsonb", **options)
