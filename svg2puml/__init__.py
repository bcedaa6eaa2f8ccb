"""Convert trees of SVG files into PlantUML sprite documents."""

__version__ = "0.1.0"
