"""ATC test suite.

Folder taxonomy
- unit/ : Isolated, fast checks of a single module/class/function.
- e2e/  : The ``atc`` CLI driven through Click's CliRunner.

General guidance
- Keep unit tests fast and deterministic (no real I/O); prefer the in-memory
  registry over mocks.
- Property-based tests live with the layer they exercise and use
  @pytest.mark.property.
"""
