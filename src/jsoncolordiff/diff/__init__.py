#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/jsoncolordiff/diff/__init__.py
"""Structural JSON comparison pipeline.

Stages
------
- accessor: parsing, shape classification and value rendering
- records: shallow top-level diff records
- context: one unchanged field for orientation
- pairing: grouping records into literal lines and structural pairs
- structural: recursive colorization of nested mappings and sequences
- words: word-level comparison of scalar text
- colorize: assembly of the expected and actual blocks

The public entry points live in :mod:`jsoncolordiff.api`.
"""
