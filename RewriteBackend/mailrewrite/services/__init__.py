"""Service layer package housing the rewrite pipeline.

Contains the prompt resolver, the single-attempt LLM invoker and the
fallback chain that tries the preferred model before the fallback one.
Routes get shared instances from ``app.extensions``.
"""
