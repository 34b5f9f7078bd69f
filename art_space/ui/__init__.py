"""Tkinter render layer."""
