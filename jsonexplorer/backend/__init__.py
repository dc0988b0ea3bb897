from .base import JsonBackend
from .jsonpath_ng_backend import JsonPathNgBackend
