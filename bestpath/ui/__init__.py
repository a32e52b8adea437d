"""Qt viewer for path maps (requires PySide6)."""
