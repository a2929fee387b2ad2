"""Contract tests.

Purpose
- Define the display name generator contract once and run it against every
  built-in generator to keep them interchangeable.
"""
