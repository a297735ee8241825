"""
# Core project space; string operations shared by the other projects.
"""
__factor_type__ = 'project'
