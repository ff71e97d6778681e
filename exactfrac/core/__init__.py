"""
Core domain model, integer domain, and contracts.

Pure building blocks with no I/O: the Fraction value type, the
fixed-width integer helpers it relies on, and its JSON contract.
"""
