# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from setuptools import setup
from Cython.Build import cythonize

modules = [\
    "cbase32",
    "consts",
    "llog"\
]

setup(
    name = 'cbase32',
    version = '0.1.0',
    description = 'Streaming human typeable base32 encoder and decoder.',
    py_modules = modules,
    ext_modules = cythonize(\
        [x + ".py" for x in modules],
        compiler_directives = {'language_level': "3"}),
    extras_require = {
        'test': ['pytest'],
    }
)
