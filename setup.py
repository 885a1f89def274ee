#!/usr/bin/env python
"""Installs StringFinder using setuptools

Run:
    pip install .
to install the package from the source archive. The compiled
StringFinderBytes extension is built only when Cython is importable
by the build itself, so install Cython first and build without isolation:
    pip install Cython
    pip install --no-build-isolation .
"""
import os
from setuptools import setup, Extension

extra_commands = {}
try:
    from Cython.Distutils import build_ext
except ImportError:
    have_cython = False
else:
    have_cython = True
print('Have cython:', have_cython)


def findVersion( ):
    a = {}
    with open( os.path.join( 'stringfinder', '__init__.py') ) as f:
        for line in f:
            if line.startswith( '__version__' ):
                exec( line, a, a )
    return a['__version__']

def isPackage( filename ):
    """Is the given filename a Python package"""
    return (
        os.path.isdir(filename) and
        os.path.isfile( os.path.join(filename,'__init__.py'))
    )
def packagesFor( filename, basePackage="" ):
    """Find all packages in filename"""
    set = {}
    for item in os.listdir(filename):
        dir = os.path.join(filename, item)
        if isPackage( dir ):
            if basePackage:
                moduleName = basePackage+'.'+item
            else:
                moduleName = item
            set[ moduleName] = dir
            set.update( packagesFor( dir, moduleName))
    return set

packages = packagesFor( "stringfinder", 'stringfinder' )
packages.update( {'stringfinder':'stringfinder'} )

def cython_extension( name, include_dirs = (), ):
    """Create a cython extension object"""
    return Extension(
        "stringfinder.%(name)s"%locals(),
        [
            os.path.join(
                'src',
                '%(name)s.pyx'%locals(),
            ),
        ],
    )

extensions = []
if have_cython:
    extensions.append( cython_extension( '_stringfinder' ) )
    extra_commands['build_ext'] = build_ext
print('extensions', [x.name for x in extensions])

if __name__ == "__main__":
    setup (
        name = "StringFinder",
        version = findVersion(),
        description = "Boyer-Moore substring search for single-byte text",
        long_description = """Boyer-Moore substring search for single-byte text

Locates the first occurrence of a pattern within a text using the
bad character rule, with an optional Cython build of the matcher
for bytes input.""",
        classifiers = [
            """Programming Language :: Python :: 3""",
            """Topic :: Software Development :: Libraries :: Python Modules""",
            """Topic :: Text Processing""",
            """Intended Audience :: Developers""",
        ],
        keywords = 'search,substring,boyer-moore,string,text',
        platforms = ['Any'],
        python_requires = ">=3.6",

        package_dir = packages,
        cmdclass= extra_commands,
        ext_modules=extensions,
        packages = list(packages.keys()),
        extras_require = {
            'test': ['pytest', 'hypothesis'],
        },
        entry_points = {
            'console_scripts': [
                'stringfinder=stringfinder.cli:main',
            ],
        },
    )
