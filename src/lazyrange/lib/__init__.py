"""
# lazyrange Core Library

This package contains the building blocks of lazyrange: the cursor contract,
the adaptor cursors, the `SequenceView` and the functions composing them, plus
the configuration and logging infrastructure the CLI and demos depend on.

Everything public is re-exported from the top-level `lazyrange` package.
"""
