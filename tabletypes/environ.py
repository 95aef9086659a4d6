# -*- coding: utf-8 -*-
import os
from collections.abc import Mapping


class Environ(Mapping):
    """Create an Environ namespace instance

    you would usually create this like this:

        environ = Environ("PREFIX_")

    Then you can access any environment variables with that prefix from the
    `environ` instance.

    :Example:
        # in your environment
        export PREFIX_SEED=1

        # in your python code
        environ = Environ("PREFIX_")

        print(environ.SEED) # "1"

        # by default, all environ values are strings, but you can set defaults
        # and set the type
        environ.setdefault("SEED", None, type=int)

        print(environ.SEED, type(environ.SEED)) # 1 <class 'int'>
    """
    @classmethod
    def find_namespace(cls, prefix):
        namespace = ""
        if prefix:
            namespace = prefix.split(".", maxsplit=1)[0].upper()
            if not namespace.endswith("_"):
                namespace += "_"
        return namespace

    def __init__(self, namespace="", environ=None):
        """
        :param namespace: str, usually __name__ from the calling module but can
            also be "PREFIX_" or something like that
        :param environ: Mapping, the environment this instance wraps, defaults
            to os.environ
        """
        self.__dict__["namespace"] = self.find_namespace(namespace)
        self.__dict__["defaults"] = {}
        self.__dict__["environ"] = os.environ if environ is None else environ

    def setdefault(self, key, value, type=None):
        """Set the value returned for key when it isn't in the environment

        :param key: str
        :param value: Any, the default value, None means "not configured"
        :param type: Callable, if present, found values are passed through
            this before being returned (None values are never converted)
        """
        self.defaults[self.ekey(key)] = {
            "value": value,
            "type": type,
        }

    def set(self, key, value):
        self.__setitem__(key, value)

    def __setattr__(self, key, value):
        self.__setitem__(key, value)

    def __setitem__(self, key, value):
        self.environ[self.key(key)] = value

    def delete(self, key):
        """remove key from the environment"""
        self.__delitem__(key)

    def __delitem__(self, key):
        self.environ.pop(self.key(key), None)

    def get(self, key, default=None):
        """get a value for key from the environment

        :param key: string, this will be normalized using the key() method
        :returns: mixed, the value in the environment of key, or default if key
            is not in the environment
        """
        try:
            return self[key]

        except KeyError:
            return default

    def __getitem__(self, key):
        ek = self.ekey(key)
        try:
            v = self.environ[self.key(key)]

        except KeyError:
            v = self.defaults[ek]["value"]

        if v is not None and ek in self.defaults:
            if self.defaults[ek]["type"]:
                v = self.defaults[ek]["type"](v)

        return v

    def __getattr__(self, key):
        try:
            return self.__getitem__(key)

        except KeyError as e:
            raise AttributeError(key) from e

    def items(self):
        seen = set()
        for k, v in self.environ.items():
            if k.startswith(self.namespace):
                ek = self.ekey(k)
                seen.add(ek)
                yield ek, v

        for ek, d in self.defaults.items():
            if ek not in seen:
                yield ek, d["value"]

    def keys(self):
        """yields all the keys of the namespace, environment keys first"""
        for k, _ in self.items():
            yield k

    def __iter__(self):
        return self.keys()

    def __len__(self):
        return len(list(self.keys()))

    def key(self, key):
        """normalizes key to have the namespace

        :Example:
            environ = Environ("FOO_")
            k = environ.key("BAR")
            print(k) # FOO_BAR
        """
        if self.namespace and not key.startswith(self.namespace):
            key = self.namespace + key
        return key

    def ekey(self, key):
        """Given a full namespaced key return the key name without the namespace

        :Example:
            environ = Environ("FOO_")
            k = environ.ekey("FOO_BAR")
            print(k) # BAR
        """
        if self.namespace and key.startswith(self.namespace):
            key = key[len(self.namespace):]
        return key

    def has(self, key):
        """Return True if key is in the environment"""
        return self.key(key) in self.environ

    def __contains__(self, key):
        return self.has(key)


###############################################################################
# Actual environment configuration that is used throughout the package
###############################################################################
environ = Environ("TABLETYPES_")

environ.setdefault("SEED", None, type=int)
"""If set, the shared default random source is seeded with this value when it
is created, handy for reproducing a shuffle"""


environ.setdefault("LOG_LEVEL", None)
"""If set, the tabletypes logger will default to this level (eg, "DEBUG")"""
