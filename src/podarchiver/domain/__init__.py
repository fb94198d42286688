"""Domain model for PODARCHIVER: feeds and episodes.

Pure data and parsing; no I/O. Must not import `podarchiver.adapters`,
`podarchiver.service_layer`, or `podarchiver.bootstrap`.
"""
