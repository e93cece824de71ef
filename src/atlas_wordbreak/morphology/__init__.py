"""
Morfologias do Atlas WordBreak.

- provider → `MorphologyProvider`, registry nome → estratégia (`exists`, `get`, `create`)
"""

from .provider import MorphologyProvider, MorphologySpec, MorphologyStrategy

__all__ = ["MorphologyProvider", "MorphologySpec", "MorphologyStrategy"]
