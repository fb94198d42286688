"""Entrypoints (inbound adapters) for PODARCHIVER.

Expose the application to the outside world (currently the CLI): parse and
validate inputs, call into `podarchiver.bootstrap`, and present results.

Dependency rule: may import `podarchiver.bootstrap` and
`podarchiver.service_layer`; avoid importing `podarchiver.adapters` directly.
"""
