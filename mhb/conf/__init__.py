from .typed import ConfigCoerceError, build_typed

__all__ = ["ConfigCoerceError", "build_typed"]
