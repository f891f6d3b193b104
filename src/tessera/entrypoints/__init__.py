"""Entry points that expose Tessera outside of Python code."""
