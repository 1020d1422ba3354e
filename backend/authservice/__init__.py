"""
Login authentication service.
"""
