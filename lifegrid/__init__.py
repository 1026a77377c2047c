"""Conway's Game of Life on text maps: grid, stepping, drawing helpers and a pygame front end."""

__version__ = "0.1.0"