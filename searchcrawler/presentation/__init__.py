"""
Presentation layer for the search crawler application.

This package contains the interfaces for interacting with the application:
- CLI (interactive Command Line Interface)
"""
