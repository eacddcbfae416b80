"""Shared helpers for :mod:`fx_convert`."""
