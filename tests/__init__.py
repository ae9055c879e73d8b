"""
Test suite for referenda-curves

Contains:
- tests/unit/          : Unit tests for fixed point math, curves, sampler, tracks, export and CLI
"""
