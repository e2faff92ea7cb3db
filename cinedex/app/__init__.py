"""Application composition layer for the Tkinter GUI.

Controllers in this package wire views, view models, adapters, and use cases
into runnable desktop workflows without placing catalog logic in views.
"""
