"""
Services behind the colb commands.
"""
