"""Launch primitives (version registry, event bus, extension slots, engine stub).

Kept free of FastAPI concerns so it can be reused by the orchestrator, the API, and tests.
"""
