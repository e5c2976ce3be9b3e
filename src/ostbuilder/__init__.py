"""OST Builder: Opportunity Solution Trees as markdown, with shareable URL fragments."""

__version__ = "0.1.0"
