"""Interfaces (application boundary) for MONIKER.

Defines framework-free contracts (ABCs) implemented by adapters and by user
supplied display name generators. Business rules stay out of this package.

Dependency rule: this package may import `moniker.domain` only. It may be
imported by `moniker.adapters`, `moniker.bootstrap` and user code.
"""
