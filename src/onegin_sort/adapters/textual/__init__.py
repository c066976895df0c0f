"""Textual front end for browsing renderings."""

from .controller import RenderingBrowser, ViewerHooks

__all__ = ["RenderingBrowser", "ViewerHooks"]
