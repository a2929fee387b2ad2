"""Bootstrap (composition root) for MONIKER.

Decides which display name generator is in effect for a test class: reads the
class's declared settings and the environment default, and wires in the
built-in generators from `moniker.adapters` or loads a custom one.

Import rules:
- Entry points and host test frameworks import *this* package.
- This package may import: `moniker.adapters`, `moniker.interfaces`,
  `moniker.domain`, and `moniker.config`.
- Inner layers must not import `moniker.bootstrap`.
"""

from .bootstrap import (
    find_generation,
    generator_for,
    load_generator,
    resolve_generator,
)

__all__ = ["find_generation", "generator_for", "load_generator", "resolve_generator"]
