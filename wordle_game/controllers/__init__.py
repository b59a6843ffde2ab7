"""
Controllers Package

Flask blueprints for the HTTP transport.
"""
