"""Domain layer: catalog entities, search criteria, and error types.

Nothing in this package imports tkinter or touches the filesystem.
"""
