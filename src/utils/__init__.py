"""
Utility functions for the sorting visualizer
"""

from .number_input import parse_number_list, format_number_list
from .enum_helper import EnumHelper

__all__ = [
    'parse_number_list',
    'format_number_list',
    'EnumHelper',
]
