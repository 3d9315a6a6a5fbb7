#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""Create, attach and detach PostgreSQL table partitions."""
import logging

import psycopg2
from django.db import DEFAULT_DB_ALIAS
from django.db.utils import DatabaseError as DJDatabaseError

from .blueprint import Blueprint
from .commands import AttachHashPartition
from .commands import AttachListPartition
from .commands import AttachRangePartition
from .commands import CreateHashPartition
from .commands import CreateHashPartitioned
from .commands import CreateListPartition
from .commands import CreateListPartitioned
from .commands import CreateRangePartition
from .commands import CreateRangePartitioned
from .commands import DetachPartition
from .commands import PARTITION_HASH
from .commands import PARTITION_LIST
from .commands import PARTITION_RANGE
from .exceptions import PartitionExecutionError
from .executor import DjangoConnectionConfig
from .executor import DjangoExecutor
from .grammar import PostgresPartitionGrammar


LOG = logging.getLogger(__name__)

DB_ERRORS = (DJDatabaseError, psycopg2.Error)


def log_json(*, msg, context=None, **kwargs):
    """Create JSON object for logging data."""
    stmt = {"message": msg}
    if context:
        stmt |= context
    stmt |= kwargs
    return stmt


class PartitionSchemaBuilder:
    """
    Issue partition DDL for a table.

    Each create/attach/detach method builds a Blueprint for the table, lets the
    callback add column definitions, attaches one partition command, compiles
    it and executes the resulting statements in order. The statements issued
    are returned.

    Params:
        executor : object with execute(sql) and fetchall(sql) (default is DjangoExecutor(using))
        connection_config : object with get(key, default) for "prefix" and "prefix_indexes"
                            (default is DjangoConnectionConfig(using))
        grammar : compiler (default is PostgresPartitionGrammar())
        using (str) : Django database alias for the default collaborators
    """

    def __init__(self, executor=None, connection_config=None, grammar=None, using=DEFAULT_DB_ALIAS):
        self.using = using
        self.executor = executor if executor is not None else DjangoExecutor(using)
        self.connection_config = (
            connection_config if connection_config is not None else DjangoConnectionConfig(using)
        )
        self.grammar = grammar if grammar is not None else PostgresPartitionGrammar()

    def get_prefix(self):
        if self.connection_config.get("prefix_indexes"):
            return self.connection_config.get("prefix") or ""
        return ""

    def create_blueprint(self, table, callback=None):
        return Blueprint(table, prefix=self.get_prefix(), callback=callback)

    def build(self, blueprint):
        """Compile the blueprint and execute its statements in order, stopping at the first failure."""
        statements = self.grammar.compile(blueprint)
        LOG.info(
            log_json(
                msg="issuing partition ddl",
                table=blueprint.get_table(),
                command=blueprint.command.name,
                statements=len(statements),
            )
        )
        for ix, sql in enumerate(statements):
            LOG.debug(f"Partition statement {ix}: {sql}")
            try:
                self.executor.execute(sql)
            except DB_ERRORS as exc:
                LOG.error(
                    log_json(
                        msg="partition statement failed",
                        table=blueprint.get_table(),
                        statement_index=ix,
                        statement=sql,
                        error=str(exc),
                    )
                )
                raise PartitionExecutionError(exc, ix, sql) from exc

        return statements

    def _apply(self, table, callback, command):
        blueprint = self.create_blueprint(table, callback)
        blueprint.set_command(command)
        return self.build(blueprint)

    # Range

    def create_range_partitioned(self, table, callback, partition_key):
        """Create a new table partitioned by range on partition_key."""
        return self._apply(table, callback, CreateRangePartitioned(partition_key))

    def create_range_partition(self, table, callback, suffix, start_value, end_value):
        """Create <table>_<suffix> as the range partition [start_value, end_value)."""
        return self._apply(table, callback, CreateRangePartition(suffix, start_value, end_value))

    def attach_range_partition(self, table, callback, partition_table, start_value, end_value):
        """Attach an existing table as a range partition."""
        return self._apply(table, callback, AttachRangePartition(partition_table, start_value, end_value))

    # List

    def create_list_partitioned(self, table, callback, partition_key):
        return self._apply(table, callback, CreateListPartitioned(partition_key))

    def create_list_partition(self, table, callback, suffix, list_value):
        return self._apply(table, callback, CreateListPartition(suffix, list_value))

    def attach_list_partition(self, table, callback, partition_table, list_value):
        return self._apply(table, callback, AttachListPartition(partition_table, list_value))

    # Hash

    def create_hash_partitioned(self, table, callback, partition_key):
        return self._apply(table, callback, CreateHashPartitioned(partition_key))

    def create_hash_partition(self, table, callback, suffix, modulus, remainder):
        return self._apply(table, callback, CreateHashPartition(suffix, modulus, remainder))

    def attach_hash_partition(self, table, callback, partition_table, modulus, remainder):
        return self._apply(table, callback, AttachHashPartition(partition_table, modulus, remainder))

    def detach_partition(self, table, callback, partition_table):
        """Detach partition_table from table, leaving it as a standalone table."""
        return self._apply(table, callback, DetachPartition(partition_table))

    # Catalog

    def _select_tables(self, sql):
        try:
            rows = self.executor.fetchall(sql)
        except DB_ERRORS as exc:
            LOG.error(log_json(msg="partition catalog query failed", statement=sql, error=str(exc)))
            raise PartitionExecutionError(exc, 0, sql) from exc
        return [str(row["tables"]) for row in rows]

    def get_partitions(self, table):
        """Get the names of the partitions of table."""
        return self._select_tables(self.grammar.compile_get_partitions(table))

    def get_all_partitioned_tables(self, strategy):
        """Get the names of all tables partitioned by strategy (range, list or hash)."""
        return self._select_tables(self.grammar.compile_get_all_partitioned_tables(strategy))

    def get_all_range_partitioned_tables(self):
        return self.get_all_partitioned_tables(PARTITION_RANGE)

    def get_all_list_partitioned_tables(self):
        return self.get_all_partitioned_tables(PARTITION_LIST)

    def get_all_hash_partitioned_tables(self):
        return self.get_all_partitioned_tables(PARTITION_HASH)
