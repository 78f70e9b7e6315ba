"""Command-line batch tools."""
