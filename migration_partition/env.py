#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""Obtain partition DDL environment settings."""
import environ

ENVIRONMENT = environ.Env()

PREFIX_ENV = "MIGRATION_PARTITION_PREFIX"
PREFIX_INDEXES_ENV = "MIGRATION_PARTITION_PREFIX_INDEXES"
