"""Domain layer for ATC.

Contains the billing rules: destinations, call records, pricing rules and
clients. This package is deliberately free of I/O.

Dependency rule: do not import from `atc.adapters` or `atc.entrypoints`.
"""
