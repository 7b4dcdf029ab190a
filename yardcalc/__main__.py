#!/usr/bin/env python3

import logging

from yardcalc import main, parse_args


def run():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    main(args)


if __name__ == '__main__':
    run()
