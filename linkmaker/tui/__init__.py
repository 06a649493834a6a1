from linkmaker.tui.renderers import LinkConsoleUI

__all__ = ["LinkConsoleUI"]
