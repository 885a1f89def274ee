"""Command-line driver for StringFinder

Usage:
    stringfinder [-v] [--file] TEXT PATTERN [PATTERN ...]

Prints one "<offset>\\t<pattern>" line per pattern, where offset is -1
when the pattern does not occur. The first pattern is searched with the
finder's initial pattern, the rest through search( new_pattern ).

Exit status is 0 if any pattern was found, 1 if none was, 2 on usage errors.
"""
import sys
import logging
import argparse

from stringfinder import __version__
from stringfinder.boyermoore import StringFinder, NOT_FOUND
from stringfinder.error import StringFinderError

log = logging.getLogger( __name__ )

def create_parser():
    parser = argparse.ArgumentParser(
        prog='stringfinder',
        description='Find the first occurrence of each PATTERN within TEXT',
    )
    parser.add_argument('text', metavar='TEXT', help='Text to search (a path with --file)')
    parser.add_argument('patterns', metavar='PATTERN', nargs='+', help='Pattern(s) to search for')
    parser.add_argument('--file', action='store_true', help='Read TEXT from the named file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log scan details to stderr')
    parser.add_argument('--version', action='version', version='stringfinder %s'%(__version__,))
    return parser

def read_text( path ):
    with open( path, 'rb' ) as f:
        return f.read()

def main( argv=None ):
    parser = create_parser()
    args = parser.parse_args( argv )
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(name)s %(levelname)s %(message)s',
        )

    text = args.text
    if args.file:
        try:
            text = read_text( text )
        except OSError as err:
            parser.error( 'Unable to read %s: %s'%( args.text, err ))
        log.debug( "Read %s bytes from %s", len(text), args.text )

    first, rest = args.patterns[0], args.patterns[1:]
    found = False
    try:
        finder = StringFinder( text, first )
        results = [(finder.search(),first)]
        for pattern in rest:
            results.append( (finder.search( pattern ),pattern) )
    except StringFinderError as err:
        parser.error( str(err) )
    for offset,pattern in results:
        print( '%s\t%s'%( offset, pattern ))
        if offset != NOT_FOUND:
            found = True
    return 0 if found else 1

if __name__ == "__main__":
    sys.exit( main() )
