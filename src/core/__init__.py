"""
Core polynomial model, term algebra, parsing and contracts.

This package is independent of the interactive session: every operation is
a pure function over term mappings or an immutable Polynomial value.
"""
