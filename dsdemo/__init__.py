"""Teaching implementations of points, lists, binary, search and red-black trees, small text algorithms and a level-set demo."""

__version__ = "0.1.0"