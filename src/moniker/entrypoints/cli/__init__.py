"""The ``moniker`` command-line interface."""
