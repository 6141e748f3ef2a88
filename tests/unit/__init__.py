"""
Unit tests mirroring the lazylog modules.

Each test module corresponds to one source module and exercises its public
interface against the stdlib backend or mocks.
"""
