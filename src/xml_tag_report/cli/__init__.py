"""Command-line interface module for XML Tag Report.

This module provides the ``xml-tag-report`` command that prints the aligned
tag report for a list of XML files.
"""

from .main import main

__all__ = ["main"]
