"""
LegalBrain backend: keyword-based legal information and IPC section suggestions.
"""
