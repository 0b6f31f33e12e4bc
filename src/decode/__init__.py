"""Type-directed decoding engine.

This package inspects record fields, classifies their kinds, and
converts raw source tokens into typed values written back into records.
"""
