"""
modresolve utilities package
"""
