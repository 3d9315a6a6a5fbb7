#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
import os
from unittest import TestCase
from unittest.mock import patch

from migration_partition.builder import PartitionSchemaBuilder
from migration_partition.executor import DjangoConnectionConfig
from migration_partition.executor import DjangoExecutor


class TestDjangoExecutor(TestCase):
    def setUp(self):
        self.executor = DjangoExecutor()
        self.executor.execute("create table if not exists __partition_names (tables text)")
        self.executor.execute("delete from __partition_names")

    def test_execute_and_fetchall(self):
        """Test that rows are returned as dicts keyed by column name, in query order."""
        self.executor.execute("insert into __partition_names (tables) values ('events_2024')")
        self.executor.execute("insert into __partition_names (tables) values ('events_2025')")
        rows = self.executor.fetchall("select tables from __partition_names order by tables desc")
        self.assertEqual(rows, [{"tables": "events_2025"}, {"tables": "events_2024"}])

    def test_params(self):
        self.executor.execute("insert into __partition_names (tables) values (%s)", ["events_p0"])
        rows = self.executor.fetchall("select tables from __partition_names where tables = %s", ["events_p0"])
        self.assertEqual(rows, [{"tables": "events_p0"}])

    def test_empty_sql(self):
        self.assertIsNone(self.executor.execute(""))
        self.assertEqual(self.executor.fetchall(None), [])

    def test_using(self):
        self.assertEqual(DjangoExecutor("prefixed").connection.alias, "prefixed")


class TestDjangoConnectionConfig(TestCase):
    def test_database_settings(self):
        config = DjangoConnectionConfig("prefixed")
        self.assertEqual(config.get("prefix"), "app_")
        self.assertTrue(config["prefix_indexes"])

    def test_missing_key(self):
        config = DjangoConnectionConfig()
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("MIGRATION_PARTITION_PREFIX", None)
            self.assertIsNone(config.get("prefix"))
            self.assertEqual(config.get("prefix", ""), "")
            with self.assertRaises(KeyError):
                config["prefix"]

    def test_environment_fallback(self):
        """Test that environment variables apply when DATABASES has no prefix settings."""
        env = {"MIGRATION_PARTITION_PREFIX": "env_", "MIGRATION_PARTITION_PREFIX_INDEXES": "true"}
        with patch.dict(os.environ, env):
            config = DjangoConnectionConfig()
            self.assertEqual(config.get("prefix"), "env_")
            self.assertIs(config.get("prefix_indexes"), True)
            self.assertEqual(PartitionSchemaBuilder(executor=DjangoExecutor()).get_prefix(), "env_")

    def test_database_settings_win(self):
        with patch.dict(os.environ, {"MIGRATION_PARTITION_PREFIX": "env_"}):
            self.assertEqual(DjangoConnectionConfig("prefixed").get("prefix"), "app_")

    def test_builder_prefix_indexes_off(self):
        builder = PartitionSchemaBuilder(using="prefix_only")
        self.assertEqual(builder.get_prefix(), "")
        self.assertEqual(PartitionSchemaBuilder(using="prefixed").get_prefix(), "app_")
