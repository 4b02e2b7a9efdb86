__pkg_bottom__ = True
identity = 'http://fault.io/project/python/calendrical'
name = 'calendrical'
abstract = 'Validated Gregorian date and time values with exact linear conversion.'
icon = '📅'
study = 'horology'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
