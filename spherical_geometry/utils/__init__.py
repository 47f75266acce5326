"""
Ambient utilities: logging, exceptions, error handling and configuration.
"""
