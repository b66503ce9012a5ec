"""
Workflows package.

Workflows orchestrate components and collaborators for one use case. They
do not import services or interfaces.
"""
