'''Command line calculator

Does not implement order of operations: operators at the same level of
parentheses are applied from left to right, so use parentheses to choose
the order yourself

Operators:
+ : addition
- : subtraction, or a negative sign before a number
* : multiplication
/ : division
^ : exponentiation

Shell commands:
history : lists the most recent expressions
quit, exit : leaves the shell
'''

import argparse
import logging
import os
from collections import OrderedDict
from contextlib import closing

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from . import model as m
from . import util
from .util.equations import calculate, solve, EquationError  # noqa: F401

logger = logging.getLogger(__name__)

default_database = 'sqlite:///:memory:'
quit_commands = {'quit', 'exit'}


def defaults():
    return OrderedDict([
        ('prompt', '>> '),
        ('history', '10'),
    ])


def is_count(text):
    try:
        return int(text) >= 0
    except ValueError:
        return False


validators = {
    'history': is_count,
}


def configure(session, initialize=False):
    '''
    Loads the configuration, optionally asking for new values
    Stored values that fail validation are replaced by their defaults
    '''
    config = util.load_config(session, defaults())
    for name, check in validators.items():
        if not check(config[name]):
            logger.warning('Invalid %s setting %r, using the default', name, config[name])
            config[name] = defaults()[name]

    if initialize:
        for name, value in list(config.items()):
            check = validators.get(name)
            while True:
                arg = input('[{}] (default: {}): '.format(name, repr(value)))
                if not arg or check is None or check(arg):
                    break
                print('Invalid value for {}: {!r}'.format(name, arg))
            if arg:
                util.sql_update(session, m.Config, {'name': name}, {'value': arg})
                config[name] = arg
    return config


def record(session, expression):
    '''
    Calculates an expression and stores it in the history
    '''
    result = calculate(expression)
    session.add(m.History(expression=expression, result=result))
    session.commit()
    return result


def shell(session, config):
    '''
    Reads expressions until the user quits
    '''
    limit = int(config['history'])
    while True:
        try:
            line = input(config['prompt'])
        except (EOFError, KeyboardInterrupt):
            print()
            break

        line = line.strip()
        if not line:
            continue
        if line in quit_commands:
            break
        if line == 'history':
            for item in util.recent_history(session, limit):
                print(item)
            continue

        print(record(session, line), flush=True)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Calculator without operator precedence',
        epilog='The database defaults to the DB environment variable, then to an in memory database.')
    parser.add_argument(
        'expression', nargs='?',
        help='An expression to solve, leave out to start the interactive shell')
    parser.add_argument(
        '-d', '--database', dest='database',
        default=os.environ.get('DB', default_database),
        help='The database url to be accessed')
    parser.add_argument(
        '-i', '--initialize', dest='initialize', action='store_true',
        help='Allows for initialization of config values')
    parser.add_argument(
        '-v', '--verbose', dest='verbose', action='store_true',
        help='Log each stage of the calculation')
    return parser.parse_args(argv)


def main(args):
    if args.expression is not None:
        print(calculate(args.expression))
        return

    engine = create_engine(args.database)
    m.Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    with closing(Session()) as session:
        config = configure(session, args.initialize)
        logger.info('Using database %s', engine.url)
        shell(session, config)
