"""Timer adapters.

The rate-limited wrappers depend on the abstract scheduler only, so the same
wrapper can run on worker-thread timers, on an asyncio event loop, or on a
manually advanced clock in tests.
"""
