# -*- coding: utf-8 -*-
"""
The source of randomness used by Table.shuffle() and Table.sample()

Nothing here is seeded when the module is imported, pass a seeded
RandomSource into a table (or into the call) if you need repeatable results,
or set TABLETYPES_SEED in the environment to seed the shared default
"""
import random
import logging

from .environ import environ


logger = logging.getLogger(__name__)


class RandomSource(object):
    """Uniform integers on demand

    This wraps a private random.Random instance so seeding one source never
    changes the numbers another source (or the random module) produces
    """
    def __init__(self, seed=None):
        """
        :param seed: Any, if not None the source is seeded with it
        """
        self.rng = random.Random()
        if seed is not None:
            self.seed(seed)

    def seed(self, value):
        logger.debug(f"Seeding random source with {value!r}")
        self.rng.seed(value)
        return self

    def uniform(self, low, high):
        """Return a random integer in [low, high], both ends inclusive"""
        return self.rng.randint(low, high)

    def next_int(self, n):
        """Return a random integer in [1, n]"""
        return self.uniform(1, n)


_default = None


def default_source():
    """Return the shared random source, creating (and possibly seeding) it on
    first use

    :returns: RandomSource
    """
    global _default
    if _default is None:
        _default = RandomSource(environ.SEED)
    return _default


def set_default_source(source):
    """Replace the shared random source, returns the previous one so tests
    can put it back

    :param source: RandomSource|None, None means a fresh source will be created
        the next time default_source() is called
    :returns: RandomSource|None
    """
    global _default
    previous = _default
    _default = source
    return previous
