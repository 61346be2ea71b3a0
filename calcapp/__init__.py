"""
Arithmetic calculator service.
"""
