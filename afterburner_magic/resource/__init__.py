""" Package for static Afterburner resources: rule tables and word overrides loaded from the assets directory. """

from types import SimpleNamespace
from typing import NoReturn


class FrozenStruct(SimpleNamespace):
    """ Immutable attribute-based data structure. Class attributes act as defaults for missing fields. """

    def _raise_on_mutate(self, *args) -> NoReturn:
        raise AttributeError('Structure is immutable.')

    __setattr__ = __delattr__ = _raise_on_mutate

    def replace(self, **changes):
        """ Return a new structure of the same type with some fields replaced. """
        fields = {**vars(self), **changes}
        return type(self)(**fields)


class ResourceError(ValueError):
    """ Raised when a static resource file is missing, malformed, or fails validation. """
