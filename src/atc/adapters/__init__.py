"""Adapters (outbound implementations) for ATC.

Concrete implementations of the ports declared in `atc.interfaces`.

Dependency rule: may import `atc.interfaces` and `atc.domain`; never
`atc.entrypoints`.
"""
