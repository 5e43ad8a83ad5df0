"""
The MODEL layer contains pure data structures and the number line logic.
It has NO knowledge of the GUI (Qt).
It deals with Validation, Geometry, Path Planning and the Narrative.
"""
