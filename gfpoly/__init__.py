"""gfpoly is a Python package for polynomial arithmetic over prime fields.

Polynomials with coefficients in GF(p), for prime p, are created via the
type factory gfpoly.gfpx.GFpX(p), and support addition, subtraction,
multiplication, Euclidean division with remainder, GCDs and modular powers,
all available via Python's operator overloading.

Irreducibility of a polynomial over GF(p) is decided by Rabin's test,
which combines square-and-multiply exponentiation of x modulo the given
polynomial with GCD computations, one for each prime divisor of its degree.

Run python -m gfpoly to test polynomials for irreducibility from the console.
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import argparse


def get_arg_parser():
    """Return parser for command line arguments passed to the gfpoly console program."""
    parser = argparse.ArgumentParser(prog='gfpoly',
                                     description='Test polynomials over GF(p) for irreducibility.')
    parser.add_argument('coefficients', type=int, nargs='*', metavar='a',
                        help='coefficients a_0 a_1 ... a_n of a_0 + a_1 x + ... + a_n x^n')

    group = parser.add_argument_group('gfpoly input')
    group.add_argument('-p', '--modulus', type=int, metavar='p',
                       help='prime modulus p (prompted for, if not set)')
    group.add_argument('-t', '--terms', type=str, metavar='s',
                       help="polynomial given as sum of terms, e.g., 'x^2+x+1'")

    group = parser.add_argument_group('gfpoly output')
    group.add_argument('-V', '--VERSION', action='store_true',
                       help='print gfpoly version number and exit')
    group.add_argument('--compact', action='store_true',
                       help='print polynomials in compact form, skipping zero terms')
    group.add_argument('--next', action='store_true',
                       help='also print the next monic irreducible polynomial')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info/warning(default)/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(log_level='warning')
    return parser
