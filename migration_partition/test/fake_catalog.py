#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""In-memory stand-in for a PostgreSQL connection that tracks partition relationships."""
import re

from psycopg2.errors import DuplicateTable
from psycopg2.errors import UndefinedTable


CREATE_PARTITIONED = re.compile(r"^create table (\S+) \(.*\) partition by (range|list|hash)", re.DOTALL)
CREATE_PARTITION = re.compile(r"^create table (\S+) partition of (\S+) for values ")
ATTACH_PARTITION = re.compile(r"^alter table (\S+) attach partition (\S+) for values ")
DETACH_PARTITION = re.compile(r"^alter table (\S+) detach partition (\S+)$")
ALTER_SEQUENCE = re.compile(r"^alter sequence (\S+) restart with (\d+)$")
PARTITIONS_OF = re.compile(r"where inhparent = '(.+)'::regclass;$")
PARTITIONED_BY = re.compile(r"where pg_partitioned_table\.partstrat = '(\w)';$")

STRATEGY_CODES = {"range": "r", "list": "l", "hash": "h"}


class FakeCatalogExecutor:
    """
    Interpret the partition DDL emitted by the grammar against an in-memory catalog.

    Every statement is recorded in `executed`. Statements containing any
    string in `fail_on` raise UndefinedTable.
    """

    def __init__(self, fail_on=()):
        self.executed = []
        self.queries = []
        self.fail_on = tuple(fail_on)
        self.tables = set()
        self.partitioned = {}
        self.inherits = {}
        self.sequences = {}

    def execute(self, sql, params=None):
        if any(marker in sql for marker in self.fail_on):
            raise UndefinedTable(f'relation for "{sql}" does not exist')
        self.executed.append(sql)

        match = CREATE_PARTITIONED.match(sql)
        if match:
            name = match.group(1).replace('"', "")
            self._create(name)
            self.partitioned[name] = match.group(2)
            return

        match = CREATE_PARTITION.match(sql)
        if match:
            child, parent = match.groups()
            self._create(child)
            self.inherits[child] = parent
            return

        match = ATTACH_PARTITION.match(sql)
        if match:
            parent, child = match.groups()
            self.inherits[child] = parent
            return

        match = DETACH_PARTITION.match(sql)
        if match:
            parent, child = match.groups()
            if self.inherits.get(child) != parent:
                raise UndefinedTable(f'relation "{child}" is not a partition of relation "{parent}"')
            del self.inherits[child]
            return

        match = ALTER_SEQUENCE.match(sql)
        if match:
            self.sequences[match.group(1)] = int(match.group(2))

    def _create(self, name):
        if name in self.tables:
            raise DuplicateTable(f'relation "{name}" already exists')
        self.tables.add(name)

    def fetchall(self, sql, params=None):
        self.queries.append(sql)

        match = PARTITIONS_OF.search(sql)
        if match:
            parent = match.group(1)
            return [{"tables": child} for child, par in self.inherits.items() if par == parent]

        match = PARTITIONED_BY.search(sql)
        if match:
            code = match.group(1)
            return [
                {"tables": name} for name, strategy in self.partitioned.items() if STRATEGY_CODES[strategy] == code
            ]

        return []
