"""Precomposition package exports."""
from .compose import compose_pairs
from .table import DEFAULT_TABLE, PrecomposeTable, pack_pattern, precompose

__all__ = ["DEFAULT_TABLE", "PrecomposeTable", "compose_pairs", "pack_pattern", "precompose"]
