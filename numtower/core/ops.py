"""Standard operation codes, shared by the promotion policy and its callers."""

import operator
from enum import IntEnum, unique


@unique
class OP(IntEnum):
    add = 0
    sub = 1
    mul = 2


# symbols for diagnostics
OP_SYMBOLS = {
    OP.add: '+',
    OP.sub: '-',
    OP.mul: '*',
}

# exact host-integer implementations, used to range check native results
OP_FUNCTIONS = {
    OP.add: operator.add,
    OP.sub: operator.sub,
    OP.mul: operator.mul,
}
