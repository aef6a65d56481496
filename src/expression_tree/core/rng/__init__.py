from .provider import SeededRandomSource

__all__ = ['SeededRandomSource']
