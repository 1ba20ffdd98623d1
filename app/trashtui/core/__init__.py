"""Application state, configuration, and runtime support for trashtui."""
