identity = 'http://fault.io/project/python/almanac'
name = 'almanac'
abstract = 'Calendar arithmetic, date and time text interchange, and interval algebra.'
fork = 'rhythm'
icon = '📅'
study = 'horology'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
