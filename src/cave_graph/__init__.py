"""
Cave Graph - constrained path enumeration over small undirected graphs.

This package enumerates every path from a start node to an end node,
where uppercase ("large") nodes may be revisited freely and lowercase
("small") nodes only under a revisit policy.
"""

__version__ = "0.1.0"
