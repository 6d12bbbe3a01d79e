"""
Business logic package.
"""
