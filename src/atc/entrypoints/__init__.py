"""Entrypoints (inbound adapters) for ATC.

Expose the billing core to the outside world through the CLI. Parse and
validate inputs, call the service layer, and present results.

Dependency rule: obtain wired objects from `atc.bootstrap`; avoid importing
`atc.adapters` directly.
"""
