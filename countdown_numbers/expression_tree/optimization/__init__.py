"""Optimization utilities for expression trees."""

from .shape_cache import ShapeCache, compile_shape, get_global_shape_cache, clear_global_shape_cache

__all__ = ['ShapeCache', 'compile_shape', 'get_global_shape_cache', 'clear_global_shape_cache']
