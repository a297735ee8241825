identity = 'http://sockutil.dev/python/internet'
name = 'internet'
abstract = 'Numeric internet address parsing for Python'
icon = '📡'

fork = 'darpa'
versioning = 'continuous'
status = 'flux'

controller = 'sockutil.dev'
contact = 'mailto:maintainers@sockutil.dev'
