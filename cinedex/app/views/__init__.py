"""Tkinter views. UI-only classes that report user intent through callbacks."""
