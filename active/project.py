identity = 'http://fault.io/project/python/fault.active'
name = 'active'
abstract = 'Time-varying values restricted to eras with exact boundary semantics.'
icon = '⏯'
study = 'animation'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
