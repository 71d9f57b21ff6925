"""Route blueprints package for API endpoints.

Holds the Flask blueprints: the rewrite API, static client assets and
placeholder icons, and the generated add-in manifest. Each module
documents its endpoint responsibilities and JSON contracts.
"""
