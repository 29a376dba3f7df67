"""ramp_tool.core: Foundation layer.

Contains the colour space, contrast maths, chroma curves, lightness solver,
ramp orchestration, presets, configuration and report builder.
This module has NO dependencies on ramp_tool.commands or ramp_tool.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
