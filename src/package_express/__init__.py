"""
Package Express

A shipping quote tool for Package Express counter operations.
Validates package weight and dimensions and estimates the shipping total.
"""

__version__ = "1.0.0"
