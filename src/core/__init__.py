"""Core: domain, contracts, services and configuration.

The Core knows nothing about CI files or terminals.
"""
