"""Console program testing polynomials over GF(p) for irreducibility.

For example, to test X^2+X+1 over GF(2), run either of:

    python -m gfpoly -p 2 1 1 1
    python -m gfpoly -p 2 -t 'x^2+x+1'

where coefficients are given in increasing order of degree.
Without coefficients (or terms), the modulus, the degree and the coefficients
are prompted for, one by one.

The polynomial is printed, followed by its status: irreducible, reducible, or
indeterminate if the computation failed.
"""

import sys
import logging
import gfpoly
from gfpoly import gfpx
from gfpoly.errors import attempt


def set_log_level(options):
    """Configure logging according to the --log-level and --no-log options."""
    if options.no_log:
        logging.basicConfig(level=logging.CRITICAL, force=True)
        return

    ch = options.log_level[0].upper()
    ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
    ch = ch if '0' <= ch <= '5' else '3'  # default to '3'
    level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
             logging.CRITICAL)[int(ch)]
    logging.basicConfig(format='{asctime} {message}', style='{', level=level, force=True)
    logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')


def read_polynomial(p=None):
    """Prompt for modulus p (unless given), degree n, and coefficients a_0, ..., a_n."""
    if p is None:
        p = int(input('Enter the modulus p (a prime number): '))
    poly = gfpx.GFpX(p)

    n = int(input('Enter the degree n: '))
    if n < 0:
        raise ValueError('degree must be nonnegative')

    c = [int(input(f'The coefficient at {gfpx.X}^{i}: ')) for i in range(n + 1)]
    return poly(c)


def main(argv=None):
    parser = gfpoly.get_arg_parser()
    options = parser.parse_args(argv)
    if options.VERSION:
        print(f'gfpoly {gfpoly.__version__}')
        return 0

    set_log_level(options)
    if options.terms is not None and options.coefficients:
        parser.error('use either coefficients or terms, not both')

    try:
        if options.terms is not None or options.coefficients:
            if options.modulus is None:
                parser.error('modulus p required for given polynomial, use -p')

            poly = gfpx.GFpX(options.modulus)
            if options.terms is not None:
                f = poly.from_terms(options.terms)
            else:
                f = poly(options.coefficients)
        else:
            f = read_polynomial(options.modulus)
    except (ValueError, EOFError) as exc:
        print(f'Invalid input: {exc}')
        return 2

    show = repr if options.compact else str
    print(f'Polynomial: {show(f)}')

    poly = type(f)
    logging.info(f'Rabin test over GF({poly.p}) for polynomial of degree {f.degree()}')
    outcome = attempt(poly.is_irreducible, f)
    if not outcome.ok:
        print(f'Status: indeterminate ({outcome.error})')
        return 1

    print(f'Status: {"irreducible" if outcome.value else "reducible"}')
    if options.next:
        print(f'Next irreducible: {show(poly.next_irreducible(f))}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
