"""MONIKER

Pluggable display-name generation for test frameworks.
Turns pre-resolved test class and method metadata into human-readable
labels for reports and UIs, using a built-in or custom naming strategy.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
