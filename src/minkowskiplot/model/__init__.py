"""
The MODEL layer contains pure data structures and the plotting geometry.
It has NO knowledge of the GUI (Qt) or the rendering (pyqtgraph).
It deals with points, coordinate mapping, invariants and curve sampling.
"""
