"""Infrastructure adapters (manifest files, CI env files, JSON export)."""
