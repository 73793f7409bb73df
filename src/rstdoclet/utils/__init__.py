#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rstdoclet/utils/__init__.py
"""Utility modules for the rstdoclet package.

This package contains dependency checking and timing helpers shared by the
renderer and the doclet entry points.
"""

from rstdoclet.utils.decorators import debug_timer, requires_dependencies
from rstdoclet.utils.packages import check_version_requirement, get_package_version

__all__ = [
    "check_version_requirement",
    "debug_timer",
    "get_package_version",
    "requires_dependencies",
]
