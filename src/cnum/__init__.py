"""
Complex numbers as immutable values with text notations.

This package contains the value type, its math primitives and the
rectangular/polar notation parser and formatter. Nothing here depends on
external systems (files, network, etc.).
"""
