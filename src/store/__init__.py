"""Object store access and inventory output layer.

This module locates loose object files, runs scans over them,
and renders the decoded inventory for external consumers.
"""
