"""
The MODEL layer contains pure data structures.
It has NO knowledge of report parsing, rendering or coordinate systems beyond
the value types it stores.
"""
