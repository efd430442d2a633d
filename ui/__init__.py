"""
Web UI module.

Provides the HTTP surface for the Route Planner:
- flask_app: JSON API over a single route session
"""
