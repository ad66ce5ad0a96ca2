"""Presentation layer - session to text frame."""

from .view import render, render_plain

__all__ = ["render", "render_plain"]
