"""Boyer-Moore substring search for single-byte text

    from stringfinder import StringFinder
    finder = StringFinder( b'Zack Berger is a student', b'student' )
    finder.search()            # 17
    finder.search( b'Zack' )   # 0
"""
__version__ = "1.0.0"

from stringfinder.boyermoore import StringFinder, StringFinderBytes, NOT_FOUND
from stringfinder.error import StringFinderError, UnsupportedCharacter

__all__ = [
    'StringFinder', 'StringFinderBytes', 'NOT_FOUND',
    'StringFinderError', 'UnsupportedCharacter', '__version__',
]
