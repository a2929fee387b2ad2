"""Entrypoints (inbound adapters) for MONIKER.

Expose the library to the outside world, currently as a command-line tool.
Parse and validate inputs, resolve generators through `moniker.bootstrap`,
and present results.

Dependency rule: may import `moniker.bootstrap`, `moniker.adapters` and
`moniker.domain`.
"""
