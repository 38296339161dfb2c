"""
Core services for Proxy Sheet.

Cross-cutting helpers (logging) shared by the lookup, collection and
presentation layers.
"""
