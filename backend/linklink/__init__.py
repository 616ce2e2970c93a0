"""Link-link tile puzzle engine.

Connectivity search, level layout generation, hints and shuffles for
link-link boards, with a FastAPI service in ``linklink.main``.
"""

__version__ = "1.0.0"
