"""Unit tests.

Guidelines
- Drive the archiver through `build_fakes()`; assert on the recorder and the
  doubles' state rather than on log output.
- Async code runs through `asyncio.run` inside plain test functions.
- Keep tests small, fast, and deterministic.
"""
