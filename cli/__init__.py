"""CLI package for the bookstore catalog"""
from .main import cli

__all__ = ['cli']
