class ParseError(ValueError):
    """json文本不合法"""


class QueryError(ValueError):
    """json path表达式不合法，或者无法在当前文档上求值"""
