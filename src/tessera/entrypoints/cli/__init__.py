"""The ``tessera`` command-line interface."""
