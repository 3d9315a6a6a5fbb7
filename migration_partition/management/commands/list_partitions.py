#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""Management command listing table partitions from the PostgreSQL catalog."""
import logging

from django.core.management.base import BaseCommand
from django.core.management.base import CommandError
from django.db import DEFAULT_DB_ALIAS

from migration_partition.builder import PartitionSchemaBuilder
from migration_partition.commands import PARTITION_STRATEGIES

LOG = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "List the partitions of a table, or every table partitioned by a strategy."

    def add_arguments(self, parser):
        parser.add_argument("--table", help="Partitioned table whose partitions are listed.")
        parser.add_argument("--strategy", choices=PARTITION_STRATEGIES, help="List tables partitioned by strategy.")
        parser.add_argument("--database", default=DEFAULT_DB_ALIAS, help="Database connection alias.")

    def handle(self, *args, **options):
        table = options.get("table")
        strategy = options.get("strategy")
        if bool(table) == bool(strategy):
            raise CommandError("Specify exactly one of --table or --strategy.")

        builder = PartitionSchemaBuilder(using=options["database"])
        if table:
            LOG.info(f"Listing partitions of {table}")
            tables = builder.get_partitions(table)
            empty_msg = f"No partitions found for {table}."
        else:
            LOG.info(f"Listing {strategy} partitioned tables")
            tables = builder.get_all_partitioned_tables(strategy)
            empty_msg = f"No {strategy} partitioned tables found."

        if not tables:
            self.stdout.write(self.style.WARNING(empty_msg))
            return

        for name in tables:
            self.stdout.write(name)
