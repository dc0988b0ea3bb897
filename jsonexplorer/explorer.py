import json
import sys

from .backend import JsonBackend, JsonPathNgBackend
from .errors import ParseError, QueryError
from .globals import ROOT, MAX_DEPTH, MAX_MATCHES, INDENT, COMMON_PATTERNS


def type_description(obj) -> str:
    # bool是int的子类，必须先判断
    if isinstance(obj, dict):
        return 'Object'
    elif isinstance(obj, list):
        return 'Array ({} items)'.format(len(obj))
    elif isinstance(obj, bool):
        return 'Boolean'
    elif isinstance(obj, int):
        return 'Number'
    elif isinstance(obj, float):
        return 'Decimal'
    elif isinstance(obj, str):
        return 'String'
    elif obj is None:
        return 'Null'
    return type(obj).__name__


class JsonExplorer:
    def __init__(
            self,
            json_text,
            backend: JsonBackend = None,
            max_depth=MAX_DEPTH,
            max_matches=MAX_MATCHES,
            indent=INDENT,
            error=False,
            warning=True,
            file=None,
    ):
        """

        Args:
            json_text: json文本
            backend: 解析和查询的后端，默认使用JsonPathNgBackend
            max_depth: outline递归的最大深度
            max_matches: query最多打印的匹配数
            indent: 每一层缩进的空格数
            error: 如果json path不合法，会raise QueryError
            warning: 如果遇到错误，会把错误信息打印到stderr
            file: 输出，默认为当前的sys.stdout

        Raises:
            ParseError: json_text不是合法的json
        """
        self.backend = backend or JsonPathNgBackend()
        self.max_depth = max_depth
        self.max_matches = max_matches
        self.indent = indent
        self.error = error
        self.warning = warning
        self.file = file

        self.raw_json = json_text
        try:
            self.data = self.backend.loads(json_text)
        except ParseError as e:
            if self.warning:
                print('Invalid JSON: {}'.format(e), file=sys.stderr)
            raise
        self.print('JSON parsed successfully!\n')

    def print(self, *args, **kwargs):
        print(*args, file=self.file, **kwargs)

    def print_indented(self, message, depth):
        self.print(' ' * (depth * self.indent) + message)

    def report(self, e: QueryError):
        if self.error:
            raise e
        if self.warning:
            print('Error in JSON path: {}'.format(e), file=sys.stderr)

    def resolve(self, path):
        """

        Returns:
            (是否找到, 第一个匹配的对象)
        """
        if not path or path == ROOT:
            return True, self.data
        matches = self.backend.find(self.data, path)
        if len(matches) == 0:
            return False, None
        return True, matches[0]

    def outline(self, path=ROOT, depth=0):
        """
        打印json的结构，dict展开所有key，list只展开第一个元素
        """
        try:
            found, obj = self.resolve(path)
        except QueryError as e:
            self.report(e)
            return
        if not found:
            self.print('Path not found!')
            return
        self._outline(obj, depth)

    def _outline(self, obj, depth):
        """
        在子对象上递归，不重新解析路径
        标量按json字面量打印：字符串带引号，布尔值和空值打印成true、false、null
        """
        if isinstance(obj, dict):
            for k, v in obj.items():
                self.print_indented('{}: {}'.format(k, type_description(v)), depth)
                if depth < self.max_depth:
                    self._outline(v, depth + 1)
        elif isinstance(obj, list):
            self.print_indented('Array with {} items'.format(len(obj)), depth)
            if len(obj) > 0 and depth < self.max_depth:
                self._outline(obj[0], depth + 1)
        else:
            self.print_indented('Value: {}'.format(json.dumps(obj, ensure_ascii=False)), depth)

    def query(self, json_path):
        """

        Args:
            json_path: json path表达式

        Returns:
            所有匹配的对象；如果表达式不合法，返回空list
        """
        try:
            matches = self.backend.find(self.data, json_path)
        except QueryError as e:
            self.report(e)
            return []

        self.print('\nFound {} matches:'.format(len(matches)))
        for match in matches[:self.max_matches]:
            self.print('\nMatch:')
            self.print(json.dumps(match, indent=2, ensure_ascii=False))
        if len(matches) > self.max_matches:
            self.print('\n... and {} more matches'.format(len(matches) - self.max_matches))
        return matches

    def show_help(self):
        self.print('Common JSONPath Patterns:')
        for i, (description, pattern) in enumerate(COMMON_PATTERNS):
            self.print('{}. {}: {}'.format(i + 1, description, pattern))

    def extra_repr(self):
        return 'backend={}, max_depth={}, max_matches={}, indent={}, error={}, warning={}'.format(
            self.backend, self.max_depth, self.max_matches, self.indent, self.error, self.warning)

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, self.extra_repr())
