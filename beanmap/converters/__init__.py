"""Bean to map projection and map to bean building."""

from .map_bean import MapBeanConverter, describe, from_map, to_map

__all__ = ['MapBeanConverter', 'describe', 'from_map', 'to_map']
