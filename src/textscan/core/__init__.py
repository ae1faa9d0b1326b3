"""Search engine core: configuration, discovery, scanning and dispatch."""
