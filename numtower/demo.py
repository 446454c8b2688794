"""Parse numeric literals and print them back in canonical form.

    python -m numtower.demo 000123 -0
    python -m numtower.demo --radix 16 1000
    python -m numtower.demo --kind rational 42/12
    python -m numtower.demo --kind complex 5+3i
"""


import argparse
import logging
import sys

from .core.utils import TowerError
from .arithmetic.bigint import BigInt
from .arithmetic.rational import Rational
from .arithmetic.dcomplex import Complex
from .arithmetic.qcomplex import ComplexRational


parsers = {
    'int': BigInt.parse,
    'rational': Rational.parse,
    'complex': Complex.parse,
    'qcomplex': ComplexRational.parse,
}


def format_literal(text, kind='int', radix=10):
    x = parsers[kind](text)
    if kind == 'int':
        return x.to_string(radix)
    else:
        return str(x)


def main(argv=None):
    parser = argparse.ArgumentParser(prog='numtower.demo',
                                     description='parse numeric literals and print their canonical form')
    parser.add_argument('--kind', choices=sorted(parsers), default='int',
                        help='type of number to parse')
    parser.add_argument('--radix', type=int, default=10,
                        help='output radix for integers, from 2 to 36')
    parser.add_argument('--verbose', action='store_true',
                        help='enable debug logging')
    parser.add_argument('literals', nargs='+', metavar='LITERAL')
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    status = 0
    for text in args.literals:
        try:
            print(format_literal(text, args.kind, args.radix))
        except (TowerError, ValueError) as e:
            print('{}: {}'.format(text, e), file=sys.stderr)
            status = 1
    return status


if __name__ == '__main__':
    sys.exit(main())
