"""TESSERA test suite.

Folder taxonomy
- unit/      : Isolated, fast checks of a single module/class/function.
- contract/  : Behavior every implementation of an interface must honor.
- e2e/       : The ``tessera`` command line driven through click's CliRunner.

Markers named after the folder are added automatically (see ``conftest.py``),
so ``pytest -m unit`` selects the fast suite. Hypothesis tests additionally
carry the ``property`` marker.
"""
