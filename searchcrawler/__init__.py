"""
Search Crawler Console

Collects crawl parameters interactively and writes search results to CSV files.
"""

from .core import (
    ConsoleInputHandler,
    InputHandler,
    LinkNormalizer,
    ParametersResolver,
    OutputHandler,
    SearchInput,
    SearchResult,
    InputOutcome,
    WriteOutcome
)

__all__ = [
    'ConsoleInputHandler',
    'InputHandler',
    'LinkNormalizer',
    'ParametersResolver',
    'OutputHandler',
    'SearchInput',
    'SearchResult',
    'InputOutcome',
    'WriteOutcome'
]

__version__ = '1.0.0'
