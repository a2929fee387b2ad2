"""MONIKER test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior every display name generator must share.
- integration/  : Introspection, configuration and generators working together.
- e2e/          : The ``moniker`` command invoked through Click's CliRunner.
- fixtures/     : Sample test classes and custom generators (no tests here).
- helpers/      : Shared utilities (no tests here).

General guidance
- Naming is pure; no test needs real I/O beyond importing fixture modules.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
