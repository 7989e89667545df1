"""Short links with social media previews."""

__version__ = "1.0.0"
