"""CLI package for Academix ingestion"""
from .main import cli

__all__ = ['cli']
