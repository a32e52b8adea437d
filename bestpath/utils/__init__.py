"""Grid construction, random walls and maze files."""
