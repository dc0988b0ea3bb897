import json
import re
from functools import lru_cache
from typing import Any, List

from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.ext import parse

from .base import JsonBackend
from ..errors import ParseError, QueryError


# 编译和求值阶段，jsonpath_ng会抛出的异常
JSON_PATH_ERRORS = (JSONPathError, re.error, TypeError, KeyError, ValueError, RecursionError)


class JsonPathNgBackend(JsonBackend):
    """
    https://github.com/h2non/jsonpath-ng
    使用扩展语法，支持filter和slice
    """
    def __init__(self, cache=True, cache_size=128):
        """

        Args:
            cache: 是否缓存编译后的表达式
            cache_size: 最多缓存多少个表达式，最近最少使用的先被淘汰
        """
        self.cache = cache
        self.cache_size = cache_size
        self._parse = lru_cache(maxsize=cache_size if cache else 0)(self._compile)

    def loads(self, text: str) -> Any:
        try:
            return json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            raise ParseError(str(e)) from e
        except RecursionError as e:
            raise ParseError('maximum nesting depth exceeded') from e

    @staticmethod
    def _compile(json_path: str):
        try:
            return parse(json_path)
        except JSON_PATH_ERRORS as e:
            raise QueryError('{}: {}'.format(type(e).__name__, e)) from e

    def compile(self, json_path: str):
        return self._parse(json_path)

    def find(self, obj, json_path: str) -> List[Any]:
        expr = self.compile(json_path)
        try:
            return [match.value for match in expr.find(obj)]
        except JSON_PATH_ERRORS as e:
            # filter里比较了不同类型的值，比如 '1' > 2；或者 =~ 后面的正则不合法
            raise QueryError('{}: {}'.format(type(e).__name__, e)) from e

    def extra_repr(self) -> str:
        return 'cache={}, cache_size={}'.format(self.cache, self.cache_size)
