"""
Command Line Interface package.
"""
