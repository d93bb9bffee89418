"""
Core settings and logging.
"""
