"""
Application package.

Wires the domain to its adapters and exposes the command-line entry point.
"""
