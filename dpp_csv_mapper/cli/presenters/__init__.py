"""Presenters for formatting CLI output."""

from .mapping import MappingPresenter

__all__ = ["MappingPresenter"]
