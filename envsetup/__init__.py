"""Fill in a .env file interactively from a .env.example template."""

__version__ = "0.1.0"
__all__ = ["__version__"]