"""
    init module for the constants
"""
