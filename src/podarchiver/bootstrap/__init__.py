"""Bootstrap (composition root) for PODARCHIVER.

The one place that picks concrete capability implementations and wires them
into the archiver. Production code never asks "am I under test?": tests build
the archiver with `podarchiver.adapters.fakes` instead of calling this.

Import rules:
- Entry points import *this* package (not adapters/service_layer directly).
- This package may import: `podarchiver.adapters`,
  `podarchiver.service_layer`, `podarchiver.interfaces`, `podarchiver.domain`
  and `podarchiver.config`.
- Inner layers must not import `podarchiver.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, run_archive

__all__ = ["AppContainer", "bootstrap", "run_archive"]
