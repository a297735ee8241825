"""
# Test framework primitives shared by the projects' test modules.
"""
__factor_type__ = 'project'
