"""Domain models and errors.

Why:
- Pure, strict data structures (Pydantic v2) for refs, tags and identities.
- The domain knows nothing about CI files, the CLI or the process environment.
"""
