#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""Django-backed statement execution and connection settings for the partition builder."""
import logging

from django.db import connections
from django.db import DEFAULT_DB_ALIAS

from .env import ENVIRONMENT
from .env import PREFIX_ENV
from .env import PREFIX_INDEXES_ENV


LOG = logging.getLogger(__name__)


class DjangoExecutor:
    """
    Run SQL on a named Django database connection.

    No transaction is opened here. Wrap the builder call in
    django.db.transaction.atomic(using=...) when a batch must be atomic.
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    @property
    def connection(self):
        return connections[self.using]

    def execute(self, sql, params=None):
        """
        Executes the given sql with any given parameters.
        Params
            sql (str) : SQL string
            params (list) : Parameters for SQL
        Returns:
            None (the cursor is closed after execution)
        """
        if not sql:
            return None

        LOG.debug(f"SQL ({self.using}): {sql}")
        with self.connection.cursor() as cursor:
            cursor.execute(sql, params)

    def fetchall(self, sql, params=None):
        """
        Execute a query and fetch all rows.
        Returns:
            list(dict) : List of dict representing the records selected indexed by column name
        """
        if not sql:
            return []

        LOG.debug(f"SQL ({self.using}): {sql}")
        with self.connection.cursor() as cursor:
            cursor.execute(sql, params)
            cursor_def = [d[0] for d in cursor.description]
            return [dict(zip(cursor_def, r)) for r in cursor.fetchall()]


class DjangoConnectionConfig:
    """
    Read-only access to the table prefix settings of a connection.

    Values come from the DATABASES entry (PREFIX, PREFIX_INDEXES), then from
    the MIGRATION_PARTITION_PREFIX / MIGRATION_PARTITION_PREFIX_INDEXES
    environment variables.
    """

    ENV_KEYS = {
        "prefix": PREFIX_ENV,
        "prefix_indexes": PREFIX_INDEXES_ENV,
    }

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def __getitem__(self, key):
        sentinel = object()
        value = self.get(key, sentinel)
        if value is sentinel:
            raise KeyError(key)
        return value

    def get(self, key, default=None):
        settings_dict = connections[self.using].settings_dict
        setting_key = key.upper()
        if setting_key in settings_dict:
            return settings_dict[setting_key]

        env_key = self.ENV_KEYS.get(key)
        if env_key and env_key in ENVIRONMENT:
            if key == "prefix_indexes":
                return ENVIRONMENT.bool(env_key, default=False)
            return ENVIRONMENT.str(env_key, default="")

        return default
