#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared utilities for delta2html."""
