"""
Static data shipped with jlic (license templates).
"""
