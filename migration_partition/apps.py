#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""Migration partition application configuration module."""
from django.apps import AppConfig


class MigrationPartitionConfig(AppConfig):
    """Migration partition application configuration."""

    name = "migration_partition"
    verbose_name = "Migration partitions"
