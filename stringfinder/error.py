"""Exceptions raised by stringfinder"""

class StringFinderError( Exception ):
    """Base class for stringfinder errors"""

class UnsupportedCharacter( StringFinderError, ValueError ):
    """Raised when a text or pattern element does not fit in a single byte

    value -- the offending character or integer
    position -- index of the value within the input
    """
    def __init__( self, value, position ):
        self.value = value
        self.position = position
        super( UnsupportedCharacter, self ).__init__( value, position )
    def __str__( self ):
        return """Value %r at position %s is not a single-byte character"""%(
            self.value, self.position,
        )
