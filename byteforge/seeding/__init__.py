"""
Seeding and maintenance scripts
"""
