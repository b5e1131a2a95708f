"""
The MODEL layer contains pure data structures and the tree geometry.
It has NO knowledge of the GUI (Qt).
It deals with points, segments and the surface they are stroked on.
"""
