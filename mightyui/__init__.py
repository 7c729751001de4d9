"""Layout helpers, a slider model, a text-editing engine with undo, and texture-atlas geometry."""

__version__ = "0.1.0"
__all__ = ["layout", "slider", "textmodel", "undo", "textedit", "atlas"]