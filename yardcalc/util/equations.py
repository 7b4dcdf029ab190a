'''
Evaluation of arithmetic expressions without operator precedence

Operators at the same parenthesis level are applied strictly from left to
right, so `2 + 3 * 4` is 20. Use parentheses to group.
'''

import logging
import math
import operator
import struct
from collections import namedtuple
from decimal import Decimal

logger = logging.getLogger(__name__)

Token = namedtuple('Token', ['type', 'value'])

NUMBER = 'NUMBER'
PAREN_OPEN = 'PAREN_OPEN'
PAREN_CLOSE = 'PAREN_CLOSE'

ADD = Token('ADD', '+')
SUB = Token('SUB', '-')
MUL = Token('MUL', '*')
DIV = Token('DIV', '/')
POWER = Token('POWER', '^')
OPEN_PAREN = Token(PAREN_OPEN, '(')
CLOSE_PAREN = Token(PAREN_CLOSE, ')')

# '-' is left out, tokenize decides between SUB and a negative sign
symbols = {token.value: token for token in [
    ADD, MUL, DIV, POWER, OPEN_PAREN, CLOSE_PAREN,
]}

digits = set('0123456789.')


class EquationError (Exception):
    pass


class EmptyInput (EquationError):
    def __init__(self):
        super().__init__('Empty input: enter a numerical expression')


class InvalidNumber (EquationError):
    def __init__(self, text):
        self.text = text
        super().__init__('Invalid number: {!r}'.format(text))


class InvalidToken (EquationError):
    def __init__(self, token):
        self.token = token
        super().__init__('Invalid token: {}'.format(token.value))


class UnbalancedParenthesis (EquationError):
    def __init__(self, missing):
        self.missing = missing
        super().__init__('Unbalanced parenthesis: missing {!r}'.format(missing))


class UnbalancedOperands (EquationError):
    def __init__(self, token):
        self.token = token
        super().__init__('Not enough operands for {}'.format(token.value))


class EmptyResult (EquationError):
    def __init__(self):
        super().__init__('Nothing to evaluate: check that the input is numerical and non empty')


class MalformedResult (EquationError):
    def __init__(self, values):
        self.values = values
        super().__init__('Too many operands for operators: {} values left over'.format(len(values)))


def f32(value):
    '''
    Rounds a float to single precision, overflowing to infinity
    '''
    try:
        return struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def number(value):
    '''
    Creates a number token
    '''
    return Token(NUMBER, f32(value))


def is_operator(token):
    return token.type in operations


def divide(a, b):
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def power(a, b):
    odd = b.is_integer() and b % 2 == 1
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and odd else math.inf
    except ValueError:
        if a == 0:
            return math.copysign(math.inf, a) if odd else math.inf
        return math.nan


operations = {
    ADD.type: operator.add,
    SUB.type: operator.sub,
    MUL.type: operator.mul,
    DIV.type: divide,
    POWER.type: power,
}


def parse_number(text):
    try:
        return number(float(text))
    except ValueError:
        raise InvalidNumber(text) from None


def tokenize(expression):
    '''
    Parses an expression into a list of tokens

    A `-` is a negative sign when it starts the expression or follows an
    operator or open parenthesis, otherwise it is a subtraction
    Unrecognized characters are ignored
    '''
    tokens = []
    buffer = ''
    for char in expression:
        if buffer and char not in digits:
            tokens.append(parse_number(buffer))
            buffer = ''

        if char in digits:
            buffer += char
        elif char == '-':
            if tokens and tokens[-1].type in (NUMBER, PAREN_CLOSE):
                tokens.append(SUB)
            else:
                buffer += char
        elif char in symbols:
            tokens.append(symbols[char])

    if buffer:
        tokens.append(parse_number(buffer))

    logger.debug('tokens: %s', tokens)
    return tokens


def infix2postfix(tokens):
    '''
    Converts an infix token list to a postfix token list

    Each operand, a number or a closed group, is followed by the operator
    waiting directly before it, which flattens operator chains from left
    to right instead of comparing precedence
    '''
    stack = []
    output = []

    for token in tokens:
        if token.type == PAREN_OPEN or is_operator(token):
            stack.append(token)
            continue

        if token.type == NUMBER:
            output.append(token)
        elif token.type == PAREN_CLOSE:
            while True:
                if not stack:
                    raise UnbalancedParenthesis('(')
                item = stack.pop()
                if item.type == PAREN_OPEN:
                    break
                output.append(item)
        else:
            raise InvalidToken(token)

        if stack and is_operator(stack[-1]):
            output.append(stack.pop())

    while stack:
        item = stack.pop()
        if item.type == PAREN_OPEN:
            raise UnbalancedParenthesis(')')
        output.append(item)

    logger.debug('postfix: %s', output)
    return output


def evaluate(postfix):
    '''
    Evaluates a postfix token list to a single precision float
    '''
    stack = []

    for token in postfix:
        if token.type == NUMBER:
            stack.append(token.value)
        elif is_operator(token):
            if len(stack) < 2:
                raise UnbalancedOperands(token)
            b, a = stack.pop(), stack.pop()
            stack.append(f32(operations[token.type](a, b)))
        else:
            raise InvalidToken(token)

    if not stack:
        raise EmptyResult()
    if len(stack) > 1:
        raise MalformedResult(stack)

    return stack[0]


def solve(expression):
    '''
    Solves an infix expression
    Raises an EquationError if the expression can not be evaluated
    '''
    tokens = tokenize(expression)
    if not tokens:
        raise EmptyInput()
    return evaluate(infix2postfix(tokens))


def format_number(value):
    '''
    Renders a single precision float with the fewest digits that read back
    to the same value, without exponent notation
    '''
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    for precision in range(1, 10):
        text = '{:.{}g}'.format(value, precision)
        if f32(float(text)) == value:
            break
    return '{:f}'.format(Decimal(text))


def calculate(expression):
    '''
    Solves an infix expression, returning either the result or an error message
    '''
    try:
        return format_number(solve(expression))
    except EquationError as e:
        logger.debug('could not solve %r: %s', expression, e)
        return str(e)


if __name__ == '__main__':
    print(calculate(input('Eq: ')))
