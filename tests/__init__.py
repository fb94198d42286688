"""PODARCHIVER test suite.

Folder taxonomy
- unit/      : One module/class/function at a time. Network access is replaced
               by recording doubles or `httpx.MockTransport`; filesystem work
               stays under `tmp_path`.
- contract/  : Behavior every implementation of a capability must share, run
               against both the in-memory double and the production adapter.
- e2e/       : The `podarchiver` CLI driven through `CliRunner`.
- fixtures/  : Feed documents and canned responses (loaded as a plugin).
- helpers/   : Shared assertion helpers (no tests here).

Property-based tests live with the layer they exercise and carry
@pytest.mark.property.
"""
