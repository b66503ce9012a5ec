"""
Components package.

browse/ holds the building blocks shared by node handlers (window clipping,
cross-axis combinators, node rendering, the handler contract).
handlers/ holds one handler per node type family.
"""
