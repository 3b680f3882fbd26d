name = 'chronicle'
abstract = 'Calendar dates, times of day, zone offsets, and text patterns.'
icon = '📅'
study = 'horology'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
