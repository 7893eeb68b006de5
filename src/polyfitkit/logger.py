"""Contains the name for the logger of PolyfitKit modules.

``polyfitkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages use the following level:

* ``DEBUG``: Progress of individual fits (degree, matrix size).

Numerically degenerate fits, such as an underdetermined degree or a matrix
column without a pivot, are reported with :class:`RuntimeWarning` through
:mod:`warnings` rather than on this logger.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``polyfitkit.logger.polyfitkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.INFO,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "polyfitkit"
polyfitkit_logger = logging.getLogger(logger_name)
