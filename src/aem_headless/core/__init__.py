"""Core request pipeline (config, dispatch, error normalization)."""

from . import config, errors

__all__ = ["config", "errors"]
