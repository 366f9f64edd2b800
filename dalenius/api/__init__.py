"""
Python API for Dalenius
=======================

High-level entry points for Dalenius–Hodge stratification:

- dalenius_hodge: strata for a sample and a number of levels
- stratify: strata plus the intermediate frequency table and distances
- frequency_table: the cumulative square-root-of-frequency table
"""

from dalenius.api.high_level import dalenius_hodge, frequency_table, stratify

__all__ = [
    "dalenius_hodge",
    "stratify",
    "frequency_table",
]
