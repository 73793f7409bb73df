#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rstdoclet/utils/decorators.py
"""Utility decorators for the rstdoclet renderer.

This module provides the dependency check wrapped around rendering methods and
a DEBUG-level timer used around the tree walk.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from rstdoclet.exceptions import DependencyError
from rstdoclet.utils.packages import check_version_requirement


def requires_dependencies(
    converter_name: str, packages: List[Tuple[str, str, str]], install_command: str = ""
) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the component (e.g., "rst"). This appears in error messages.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "docutils")
        - import_name: Module name for import statement (e.g., "docutils")
        - version_spec: Version requirement (e.g., ">=0.18" or "" for any version)
    install_command : str, default ""
        Install hint for the extra that provides the packages (e.g.,
        ``pip install 'rstdoclet[rst]'``). Without one the error suggests
        upgrading the individual packages.

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("rst", DEPS_DOCUTILS, install_command=DOCUTILS_INSTALL_COMMAND)
        ... def render(self, text):
        ...     from docutils.core import publish_parts
        ...     # rendering logic here

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    # nosemgrep: python.lang.security.audit.non-literal-import.non-literal-import
                    importlib.import_module(import_name)

                    if version_spec:
                        meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                        if not meets_requirement:
                            version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    install_command=install_command,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Rendering comments")

    Notes
    -----
    Zero overhead when DEBUG logging is disabled.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
