"""
Core functionality for the meeting notes application.

This package contains modules for resolving audio sources, transcribing
audio, analysing transcripts and exporting the results.
"""
