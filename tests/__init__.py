"""Test package for the instrument cluster.

Covers the dispatch engine, the mappers, the gauge geometry and the pygame
renderers. Rendering tests run headlessly with pygame's dummy video driver,
so no real window is opened. Run ``pytest`` from the project root.
"""
