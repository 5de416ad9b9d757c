"""
The MODEL layer contains pure data structures and math.
It has NO knowledge of the GUI (Qt).
It deals with the angle state, trigonometry, snapping and text formatting.
"""
