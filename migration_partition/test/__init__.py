#
# Copyright 2026 Red Hat Inc.
# SPDX-License-Identifier: Apache-2.0
#
"""Partition DDL test suite."""
import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "migration_partition.test.settings")
django.setup()
