"""
Core helpers shared across services and routers
"""
