"""Composed pipelines.

This module wires transducers together through fresh channels and runs
them as concurrent stages with first-error-wins failure handling.
"""
