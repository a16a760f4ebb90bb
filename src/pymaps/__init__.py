from pymaps.ordered_map import OrderedMap
from pymaps.ordered_map.sorted_map import DescendingSortedMap

__all__ = ["OrderedMap", "DescendingSortedMap"]
