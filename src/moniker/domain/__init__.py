"""Domain layer for MONIKER.

Holds the value objects the naming strategies operate on (class, method and
parameter-type descriptors, the generation settings) and the errors raised
when they are misused. Nothing here performs I/O or introspection.

Dependency rule: this package must not import from any other `moniker.*`
package.
"""
