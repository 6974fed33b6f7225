"""
The MODEL layer contains pure data structures and geometry.
It has NO knowledge of output streams or logging configuration.
"""
