"""Loose object decoding pipeline.

This module turns compressed object files into typed stored objects.
Stages run strictly in order: inflate, hash, header, content, assembly.
"""
