#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""
PostgreSQL DDL for native table partitioning.

The grammar is stateless: every compile method reads the Blueprint and its
attached command and returns literal SQL. Nothing here touches a connection.
"""
import logging

from .commands import PARTITION_HASH
from .commands import PARTITION_LIST
from .commands import PARTITION_RANGE
from .commands import STRATEGY_CODES
from .exceptions import PartitionCompilationError


LOG = logging.getLogger(__name__)


def quote_literal(value):
    """Inline a value as a SQL string literal body (without the surrounding quotes)."""
    return str(value).replace("'", "''")


class PostgresPartitionGrammar:
    """Compile partition commands into PostgreSQL statements."""

    def compile(self, blueprint):
        """
        Compile the command attached to the blueprint.
        Params:
            blueprint (Blueprint) : table definition with exactly one partition command
        Returns:
            list(str) : statements in execution order
        """
        command = blueprint.command
        if command is None:
            raise PartitionCompilationError(f"No partition command set for table {blueprint.get_table()}")

        compiler = getattr(self, f"compile_{command.name}", None)
        if compiler is None:
            raise PartitionCompilationError(f"Unknown partition command {type(command).__name__}")

        return compiler(blueprint)

    # Identifiers

    def wrap_segment(self, segment):
        return '"' + segment.replace('"', '""') + '"'

    def wrap_table(self, blueprint):
        return ".".join(self.wrap_segment(seg) for seg in blueprint.get_table().split("."))

    def unquoted_table(self, blueprint):
        # "x partition of y" takes the parent as a bare relation path
        return self.wrap_table(blueprint).replace('"', "")

    def get_columns(self, blueprint):
        columns = []
        for col in blueprint.columns:
            sql = f"{self.wrap_segment(col.name)} {col.data_type}"
            if not col.nullable:
                sql += " not null"
            if col.default is not None:
                sql += f" default {col.default}"
            if col.primary:
                sql += " primary key"
            columns.append(sql)
        return columns

    # Auto-increment sequences

    def compile_auto_increment_starting_value(self, blueprint, column):
        # Only an explicit starting value touches the sequence; partitions share the parent's.
        if not column.auto_increment or column.starting_value is None:
            return ""
        return (
            f"alter sequence {self.unquoted_table(blueprint)}_{column.name}_seq "
            + f"restart with {column.starting_value}"
        )

    def compile_auto_increment_starting_values(self, blueprint):
        return [self.compile_auto_increment_starting_value(blueprint, col) for col in blueprint.columns]

    def _with_fixups(self, blueprint, statement, strategy):
        statements = [statement]
        if strategy in (PARTITION_RANGE, PARTITION_HASH):
            statements.extend(self.compile_auto_increment_starting_values(blueprint))
        return [sql for sql in statements if sql]

    def _bounds(self, command):
        if command.strategy == PARTITION_RANGE:
            return f"from ('{quote_literal(command.start_value)}') to ('{quote_literal(command.end_value)}')"
        elif command.strategy == PARTITION_LIST:
            return f"in ('{quote_literal(command.list_value)}')"
        elif command.strategy == PARTITION_HASH:
            return f"with (modulus {command.modulus}, remainder {command.remainder})"
        raise PartitionCompilationError(f"Unknown partition strategy {command.strategy!r}")

    # Partitioned (parent) tables

    def compile_create_partitioned(self, blueprint):
        command = blueprint.command
        if command.strategy == PARTITION_RANGE:
            partition_by = f"range ({command.key_columns})"
        elif command.strategy in (PARTITION_LIST, PARTITION_HASH):
            partition_by = f"{command.strategy}({command.key_columns})"
        else:
            raise PartitionCompilationError(f"Unknown partition strategy {command.strategy!r}")

        sql = "create table {} ({}) partition by {}".format(
            self.wrap_table(blueprint), ", ".join(self.get_columns(blueprint)), partition_by
        )
        return self._with_fixups(blueprint, sql, command.strategy)

    compile_create_range_partitioned = compile_create_partitioned
    compile_create_list_partitioned = compile_create_partitioned
    compile_create_hash_partitioned = compile_create_partitioned

    # Partitions

    def compile_create_partition(self, blueprint):
        command = blueprint.command
        parent = self.unquoted_table(blueprint)
        sql = f"create table {parent}_{command.suffix} partition of {parent} for values {self._bounds(command)}"
        return self._with_fixups(blueprint, sql, command.strategy)

    compile_create_range_partition = compile_create_partition
    compile_create_list_partition = compile_create_partition
    compile_create_hash_partition = compile_create_partition

    def compile_attach_partition(self, blueprint):
        command = blueprint.command
        parent = self.unquoted_table(blueprint)
        if command.strategy == PARTITION_RANGE:
            sql = f"alter table {parent} attach partition {command.partition_table} for values {self._bounds(command)}"
        else:
            # list and hash attach keep the "partition of" phrasing
            sql = f"alter table {parent} partition of {parent} for values {self._bounds(command)}"
        return [sql]

    compile_attach_range_partition = compile_attach_partition
    compile_attach_list_partition = compile_attach_partition
    compile_attach_hash_partition = compile_attach_partition

    def compile_detach_partition(self, blueprint):
        command = blueprint.command
        return [f"alter table {self.unquoted_table(blueprint)} detach partition {command.partition_table}"]

    # Catalog queries

    def compile_get_partitions(self, table):
        return (
            "select inhrelid::regclass as tables from pg_catalog.pg_inherits "
            + f"where inhparent = '{quote_literal(table)}'::regclass;"
        )

    def compile_get_all_partitioned_tables(self, strategy):
        code = STRATEGY_CODES.get(strategy)
        if code is None:
            raise PartitionCompilationError(f"Unknown partition strategy {strategy!r}")
        return (
            "select pg_class.relname as tables from pg_class "
            + "inner join pg_partitioned_table on pg_class.oid = pg_partitioned_table.partrelid "
            + f"where pg_partitioned_table.partstrat = '{code}';"
        )
