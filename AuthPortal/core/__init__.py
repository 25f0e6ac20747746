"""
Core components of AuthPortal: client-side auth workflows and logging.
"""
