"""
Test configuration package.
"""
