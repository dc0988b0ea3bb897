from typing import Any, List


class JsonBackend:
    """
    解析和查询的后端
    只需要实现loads和find，就可以替换成任意的json / json path库
    """
    def loads(self, text: str) -> Any:
        """

        Args:
            text: json文本

        Returns:
            解析后的json对象
        Raises:
            ParseError: 如果text不是合法的json
        """
        raise NotImplementedError

    def find(self, obj, json_path: str) -> List[Any]:
        """

        Args:
            obj: json对象
            json_path: json path表达式，原样交给后端

        Returns:
            按顺序排列的所有匹配的子对象
        Raises:
            QueryError: 如果json_path不合法
        """
        raise NotImplementedError

    def extra_repr(self) -> str:
        return ''

    def __repr__(self):
        return '{}({})'.format(self.__class__.__name__, self.extra_repr())
