"""tui_palette.core — Foundation layer.

Contains the colour type, role and node types, the palette, the TOML theme
loader, theme discovery, and the text/JSON and swatch renderers.
Only stdlib, numpy, and PIL are allowed here.
"""
