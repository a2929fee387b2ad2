"""Integration tests.

Purpose
- Name real Python test classes end to end: introspection builds the
  descriptors, bootstrap picks the generator, the generator names them.
"""
