"""Utility helpers shared by the zxcv rendering engine and content writers."""
