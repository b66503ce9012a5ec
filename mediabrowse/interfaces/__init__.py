"""
Interfaces package.

Thin presentation layers (HTTP API, CLI) over the services registered in
mediabrowse.app.
"""
