from unmint.version import VERSION

__version__ = VERSION
