"""pygame viewer for a running match."""
