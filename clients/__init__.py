"""
Client SDKs for the Intelligent Code Analysis API.
"""
