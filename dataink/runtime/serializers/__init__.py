# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Serializers for analysis and comparison results.

All serializers preserve results exactly -- no modification or inference.
"""

from dataink.runtime.serializers.base import SerializerFormat
from dataink.runtime.serializers.export import export
from dataink.runtime.serializers.report import to_report
from dataink.runtime.serializers.tabular import to_csv

__all__ = [
    "SerializerFormat",
    "export",
    "to_csv",
    "to_report",
]
