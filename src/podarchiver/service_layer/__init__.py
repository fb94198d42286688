"""Service layer for PODARCHIVER.

Application use cases written against `podarchiver.interfaces`. The only
adapter imports are the production defaults a use case falls back to when a
capability is not injected, so the same code runs with real adapters or with
the in-memory test doubles.
"""
