"""
Figma variables sync.

- models.py: parsed Figma variables response
- naming.py / units.py / color.py: name, unit and color normalization
- api.py: Figma REST client
- config.py: .figwindrc handling
- converters/: Tailwind v3/v4 converters and token processors
"""
