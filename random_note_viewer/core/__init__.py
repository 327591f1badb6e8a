"""Core, toolkit-free building blocks of Random Note Viewer."""
