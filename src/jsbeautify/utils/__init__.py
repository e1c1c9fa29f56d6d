#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsbeautify/utils/__init__.py
"""Utility modules for the jsbeautify package.

This package contains dependency checking helpers and timing decorators
used by the interpreter-backed engine.
"""

from jsbeautify.utils.decorators import debug_timer, requires_dependencies
from jsbeautify.utils.packages import check_version_requirement, get_package_version

__all__ = [
    "check_version_requirement",
    "debug_timer",
    "get_package_version",
    "requires_dependencies",
]
