"""Adapters for MONIKER.

Provide concrete implementations of the `moniker.interfaces` contracts (the
built-in display name generators) and the introspection that turns live
Python classes and functions into domain descriptors.

Dependency rule: may import `moniker.domain` and `moniker.interfaces`; those
packages must not import this one.
"""
