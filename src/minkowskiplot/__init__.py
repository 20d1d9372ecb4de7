"""Interactive Euclidean / Minkowski point plotter."""
