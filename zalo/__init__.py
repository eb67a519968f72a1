"""TextMate scopes, VSCode theme compilation, selector matching and CSS generation."""

__version__ = "0.2.48"