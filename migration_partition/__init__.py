#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""Declarative PostgreSQL partition DDL for schema migrations."""
from .blueprint import Blueprint
from .blueprint import ColumnDefinition
from .blueprint import Default
from .builder import PartitionSchemaBuilder
from .commands import PARTITION_HASH
from .commands import PARTITION_LIST
from .commands import PARTITION_RANGE
from .exceptions import MissingPartitionFieldError
from .exceptions import PartitionCompilationError
from .exceptions import PartitionConstructionError
from .exceptions import PartitionError
from .exceptions import PartitionExecutionError
from .grammar import PostgresPartitionGrammar
