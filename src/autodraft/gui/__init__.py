"""PyQt6 user interface for Auto Draft."""

from autodraft.gui.mainwindow import AutoDraftMainWindow

__all__ = ["AutoDraftMainWindow"]
