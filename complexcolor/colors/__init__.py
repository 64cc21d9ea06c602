from .triple import ColorTriple

__all__ = ["ColorTriple"]
