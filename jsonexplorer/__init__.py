from .version import __version__
from .backend import JsonBackend, JsonPathNgBackend
from .errors import ParseError, QueryError
from .explorer import JsonExplorer, type_description
from .globals import *
