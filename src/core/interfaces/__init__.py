"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- The Core depends on abstractions (manifest source, identity sinks), not files.
"""
