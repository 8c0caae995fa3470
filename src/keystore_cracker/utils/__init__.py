
"""Utility functions for the keystore cracker."""
