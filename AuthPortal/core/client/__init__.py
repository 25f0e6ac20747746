"""
Client module for AuthPortal.
Holds the sign-in and sign-up workflows and their shared utilities.
"""
