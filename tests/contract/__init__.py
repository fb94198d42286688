"""Contract tests.

Each capability's shared behavior is written once and run against every
implementation through a parametrized fixture (`"fake"`, `"local"`,
`"http"`).
"""
