"""FactPages record kinds.

This package models the NPD FactPages tables as immutable records.
Each kind module pairs a record dataclass with a token constructor.
"""
