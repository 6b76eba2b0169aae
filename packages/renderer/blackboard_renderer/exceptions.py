"""Renderer error taxonomy."""

from __future__ import annotations


class BlackboardError(Exception):
    """Base class for errors raised by the blackboard packages."""


class InvalidContentError(BlackboardError, ValueError):
    """Content document or analysis payload is malformed."""


class RenderingFailure(BlackboardError):
    """A render pass failed; no artifact was produced."""
