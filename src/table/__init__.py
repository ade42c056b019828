"""
In-memory delimited table: load, point lookup, single-cell edit, write back.

Holds rows of opaque string cells split on a literal comma, with no quoting,
header handling, or schema enforcement.
"""
