"""
HTTP API for the Thumbor URL builder
"""
