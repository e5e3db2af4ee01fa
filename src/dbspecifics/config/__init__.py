"""
Override configuration for backend profiles.
"""
from dbspecifics.config.overrides import SpecificsConfig

__all__ = ['SpecificsConfig']
