"""Framework-free implementations backing the tool definitions."""
