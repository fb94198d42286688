"""Adapters (infrastructure) for PODARCHIVER.

Concrete implementations of the capability interfaces: production adapters
backed by httpx and the local filesystem, and in-memory test doubles (see
`podarchiver.adapters.fakes`) that record every call.

Dependency rule: may import `podarchiver.interfaces` and
`podarchiver.domain`; neither may import this package.
"""
