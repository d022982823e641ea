"""Unbuffered channels.

This module groups the rendezvous channel and its supplier and
consumer helpers. Channels are the only state shared between stages.
"""
