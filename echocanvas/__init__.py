"""Echo Canvas - click to spawn fading ripples, each with its own tone."""

__version__ = "0.1.0"
