"""
Animation step generators
"""

from .bubble_sort import StepSequencer, generate_steps, comparison_count, swap_count

__all__ = [
    'StepSequencer',
    'generate_steps',
    'comparison_count',
    'swap_count',
]
