"""Connect-N board game with a pygame window and a minimax computer opponent."""

__version__ = "0.1.0"