"""fspro - filesystem inspection, selective archiving and filtered transfer.

The public operations live in :mod:`fspro.filesystem`; the ``fspro``
command line tool is defined in :mod:`fspro.cli`.
"""

__version__ = "0.1.0"
