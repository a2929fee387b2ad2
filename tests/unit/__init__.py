"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Build descriptors by hand; do not introspect live classes unless the
  introspection adapter itself is under test.
- Keep tests small, fast, and deterministic.
"""
