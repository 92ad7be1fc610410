"""
DataVault Pro - Core

Configuration, exceptions, constants and the application context.
"""
