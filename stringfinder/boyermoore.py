"""Boyer-Moore substring search using the bad character rule

StringFinder owns a text and a pattern and reports the offset of the
first occurrence of the pattern within the text, or NOT_FOUND (-1).

An empty pattern never matches, not even at offset 0 of an empty text.
"""
import logging

from stringfinder.error import UnsupportedCharacter

log = logging.getLogger( __name__ )

NOT_FOUND = -1
ALPHABET_SIZE = 256

def as_bytes( sequence ):
    """Coerce sequence to bytes, one byte per element

    Accepts bytes-like objects, str with code points below 256 and
    iterables of integers in range(256).
    """
    if isinstance( sequence, bytes ):
        return sequence
    if isinstance( sequence, (bytearray,memoryview) ):
        return bytes( sequence )
    if isinstance( sequence, str ):
        try:
            return sequence.encode( 'latin-1' )
        except UnicodeEncodeError as err:
            raise UnsupportedCharacter( sequence[err.start], err.start )
    try:
        iterator = iter( sequence )
    except TypeError:
        raise TypeError( """Expected a byte sequence, got %s"""%( type(sequence).__name__, ))
    result = bytearray()
    for position,value in enumerate( iterator ):
        if isinstance( value, bool ) or not isinstance( value, int ) or not 0 <= value < ALPHABET_SIZE:
            raise UnsupportedCharacter( value, position )
        result.append( value )
    return bytes( result )

def last_occurrences( pattern ):
    """Build the bad character table for pattern (bytes)

    Entry i is the last index at which byte value i occurs in pattern,
    or NOT_FOUND if it does not occur at all.
    """
    table = [NOT_FOUND] * ALPHABET_SIZE
    for i,byte in enumerate( pattern ):
        table[byte] = i
    return table

class StringFinder( object ):
    """Find the first occurrence of a pattern within a text

    text -- the text to be searched, fixed for the life of the finder
    pattern -- the current pattern, replaced by search( new_pattern )

    Not safe to share between threads while the pattern is being replaced.
    """
    def __init__( self, text=b'', pattern=b'' ):
        self._text = as_bytes( text )
        self._set_pattern( pattern )

    @property
    def text( self ):
        return self._text
    @property
    def pattern( self ):
        return self._pattern

    def last_occurrence( self, byte ):
        """Return the skip table entry for byte (int or single character)"""
        if isinstance( byte, bool ):
            raise UnsupportedCharacter( byte, 0 )
        if not isinstance( byte, int ):
            encoded = as_bytes( byte )
            if len(encoded) != 1:
                raise ValueError( """Expected a single character, got %r"""%( byte, ))
            byte = encoded[0]
        elif not 0 <= byte < ALPHABET_SIZE:
            raise UnsupportedCharacter( byte, 0 )
        return self._last[byte]

    def search( self, new_pattern=None ):
        """Return the index of the first occurrence of the pattern in the text

        If new_pattern is given it replaces the current pattern (and all
        state derived from it) before the search runs.

        returns NOT_FOUND if the pattern is empty or does not occur
        """
        if new_pattern is not None:
            self._set_pattern( new_pattern )
        return self._scan()

    def _set_pattern( self, pattern ):
        self._pattern = as_bytes( pattern )
        self._last = last_occurrences( self._pattern )
        log.debug( "Rebuilt skip table for %s-byte pattern", len(self._pattern) )
        self._good_suffix_preprocessing()

    def _good_suffix_preprocessing( self ):
        """Build good suffix state for the current pattern

        Called after every skip table rebuild. The base class only
        implements the bad character rule, so there is nothing to build.
        """

    def good_suffix_shift( self, p ):
        """Shift proposed by the good suffix rule for a mismatch at pattern index p

        The larger of this and the bad character shift is used. Zero means
        no opinion.
        """
        return 0

    def _scan( self ):
        text = self._text
        pattern = self._pattern
        last = self._last
        size = len(pattern)
        if size == 0:
            return NOT_FOUND

        skip = 0
        # past this the pattern would overhang the end of the text
        max_skip = len(text) - size
        alignments = 0
        while skip <= max_skip:
            alignments += 1
            p = size - 1
            while p >= 0 and text[skip+p] == pattern[p]:
                p -= 1
            if p < 0:
                log.debug( "Match at %s after %s alignments", skip, alignments )
                return skip
            # text[skip+p] is the bad character
            update = max(
                p - last[text[skip+p]],
                self.good_suffix_shift( p ),
            )
            if update >= 1:
                skip += update
            else:
                skip += 1
        log.debug( "No match after %s alignments", alignments )
        return NOT_FOUND

try:
    from stringfinder._stringfinder import StringFinderBytes
except ImportError:
    StringFinderBytes = None
