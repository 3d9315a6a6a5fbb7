#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""Partition DDL exceptions."""
import os

from django.db.utils import DatabaseError as DJDatabaseError


def get_driver_exception(db_exception):
    """Return the psycopg2 exception wrapped by a Django DatabaseError, if any."""
    if isinstance(db_exception, DJDatabaseError):
        return db_exception.__cause__ or db_exception.__context__ or db_exception
    else:
        return db_exception


class PartitionError(Exception):
    """Base class for partition DDL errors."""


class PartitionConstructionError(PartitionError):
    """A partition command or table definition was built incorrectly."""


class MissingPartitionFieldError(PartitionConstructionError):
    """A field required by a partition command was not supplied."""

    def __init__(self, command, field, reason="is required"):
        self.command = command
        self.field = field
        super().__init__(f"{command}: field '{field}' {reason}")


class PartitionCompilationError(PartitionError):
    """The compiler was asked for something it cannot produce."""


class PartitionExecutionError(PartitionError):
    """
    The database rejected a statement of a compiled batch.

    Statements before statement_index have already been applied.
    """

    def __init__(self, db_exception, statement_index, statement):
        self.db_exception = get_driver_exception(db_exception)
        self.statement_index = statement_index
        self.statement = statement
        self.pgcode = getattr(self.db_exception, "pgcode", None)
        self.pgerror = getattr(self.db_exception, "pgerror", None)
        super().__init__(str(self.db_exception).strip())

    def __str__(self):
        return (
            f"{self.args[0]}{os.linesep}"
            + f"STATEMENT {self.statement_index}: {self.statement}"
        )

    def as_dict(self):
        return {
            "exception_type": type(self.db_exception).__name__,
            "message": self.args[0],
            "pgcode": self.pgcode,
            "statement_index": self.statement_index,
            "statement": self.statement,
        }
