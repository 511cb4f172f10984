"""
streamloop utilities package
"""
