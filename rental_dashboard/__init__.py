"""
Core package for the Brazilian rental price dashboard.

Submodules provide the prediction service client, payload transformation,
and user interface rendering helpers that are orchestrated by the top-level
`app.py`.
"""
