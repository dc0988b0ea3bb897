import argparse
import sys

from .errors import ParseError, QueryError
from .explorer import JsonExplorer
from .globals import ROOT, MAX_DEPTH, MAX_MATCHES
from .version import __version__


DEMO_JSON = """{
    "store": {
        "books": [
            {
                "title": "Book 1",
                "price": 12.99,
                "categories": ["fiction", "mystery"]
            },
            {
                "title": "Book 2",
                "price": 8.99,
                "categories": ["non-fiction"]
            }
        ],
        "electronics": [
            {
                "name": "Laptop",
                "price": 999.99
            }
        ]
    }
}"""

DEMO_QUERIES = (
    '$..price',
    '$.store.books[?(@.price < 10)]',
    '$.store.books[*].categories[*]',
)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='jsonexplorer', description='Print the outline of a json document and run json path queries on it.')
    parser.add_argument('file', nargs='?', help='json file, "-" for stdin; the demo document if omitted')
    parser.add_argument('--path', default=ROOT, help='root of the outline (default: %(default)s)')
    parser.add_argument('-q', '--query', action='append', default=[], help='json path query, can be repeated')
    parser.add_argument('--patterns', action='store_true', help='print common json path patterns')
    parser.add_argument('--max-depth', type=int, default=MAX_DEPTH)
    parser.add_argument('--max-matches', type=int, default=MAX_MATCHES)
    parser.add_argument('--strict', action='store_true', help='exit with 1 on an invalid json path')
    parser.add_argument('--version', action='version', version='%(prog)s {}'.format(__version__))
    return parser


def read_text(path):
    if path is None:
        return DEMO_JSON
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as file:
        return file.read()


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        explorer = JsonExplorer(
            read_text(args.file), max_depth=args.max_depth, max_matches=args.max_matches, error=args.strict)
    except ParseError:
        return 1

    queries = args.query
    demo = not queries and not args.patterns
    if demo:
        queries = DEMO_QUERIES

    try:
        print('JSON Structure:')
        explorer.outline(args.path)
        if args.patterns or demo:
            print('\nCommon Patterns:')
            explorer.show_help()
        if queries:
            print('\nTrying some queries:')
        for query in queries:
            explorer.query(query)
    except QueryError as e:
        print('Error in JSON path: {}'.format(e), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
