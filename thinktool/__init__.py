# Lightweight package init; avoid heavy imports.
from .runtime.notebook import Entry, Notebook  # re-export for convenience

__version__ = "0.0.1"

__all__ = ["Entry", "Notebook", "__version__"]
