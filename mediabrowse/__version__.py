"""Version information for mediabrowse."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to node type tokens or compound id shapes
# MINOR: New node types, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.3.1"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.3.1 - Search fixes
#         - WMP pre-filter answers folderPath queries with an explicit empty result
#         - Search window clipped against search_max like random/recent views
# 0.3.0 - Cross-axis views
#         - Folder x Genre, Folder x Artist, Folder x Album combinators
#         - Single-folder collapse evaluated on every call
#         - Random song views by genre and by folder genre
# 0.2.0 - HTTP and CLI interfaces
#         - /api/web/browse, /api/web/search, /api/web/menu
#         - `mediabrowse` CLI with rich output
# 0.1.0 - Initial pre-alpha release
#         - Dispatcher, handler contract, compound identifier codec
