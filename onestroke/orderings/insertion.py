from . import Ordering, register_ordering

@register_ordering
class Insertion(Ordering):
    name = "insertion"
