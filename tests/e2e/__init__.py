"""End-to-end tests of the ``atc`` command-line interface."""
