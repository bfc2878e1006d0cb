from ..core.errors import InvalidGraph
from . import Ordering, register_ordering

@register_ordering
class Label(Ordering):
    """Far endpoint's caller label first, input order second."""
    name = "label"

    def arrange(self, graph):
        arranged = []
        for node, ids in enumerate(graph.incident):
            try:
                arranged.append(tuple(sorted(
                    ids,
                    key=lambda i: (graph.labels[graph.edges[i].other(node)], i),
                )))
            except TypeError as exc:
                raise InvalidGraph("label ordering needs mutually comparable node ids") from exc
        return tuple(arranged)
