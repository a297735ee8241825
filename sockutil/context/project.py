identity = 'http://sockutil.dev/python/context'
name = 'context'
abstract = 'Supplemental string operations'
icon = '🔋'

fork = 'potential'
versioning = 'continuous'
status = 'flux'

controller = 'sockutil.dev'
contact = 'mailto:maintainers@sockutil.dev'
