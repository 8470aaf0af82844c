"""
Interpreter package - Free-text chat commands to structured commands
"""

from .command_interpreter import CommandInterpreter, parse_command
from .responses import describe_command, CLARIFICATION_MESSAGE, GENERIC_MESSAGE

__all__ = [
    'CommandInterpreter',
    'parse_command',
    'describe_command',
    'CLARIFICATION_MESSAGE',
    'GENERIC_MESSAGE',
]
