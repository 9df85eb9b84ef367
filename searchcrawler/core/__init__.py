"""
Core functionality for the search crawler console.
This package contains input acquisition and result output.
"""

from .models import SearchInput, SearchResult, InputOutcome, WriteOutcome
from .link_normalizer import LinkNormalizer
from .parameters_resolver import ParametersResolver
from .input_handler import InputHandler, ConsoleInputHandler
from .output_handler import OutputHandler

__all__ = [
    'SearchInput',
    'SearchResult',
    'InputOutcome',
    'WriteOutcome',
    'LinkNormalizer',
    'ParametersResolver',
    'InputHandler',
    'ConsoleInputHandler',
    'OutputHandler'
]
