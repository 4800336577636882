"""Data models, static lexicons, and file loaders."""
