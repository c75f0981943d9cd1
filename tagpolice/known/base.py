# -*- coding: utf-8; -*-

import keyword


class KnownDict(object):

    """A closed, read-only table of registered codes.

    Every item is a dictionary with the code itself under ``_`` (an instance
    of `cls`, which compares case-insensitively), its human-readable name
    under ``_title``, and any of the `extra_info` keys.

    Any code that is registered in the table can also be obtained as an
    attribute, named after the code in lowercase: ``language.known.en``.
    """

    def __init__(self, cls, items, extra_info=None, citation=None):
        self.cls = cls
        self.citation = citation
        allowed_info = set(['_', '_title'] + (extra_info or []))
        self._by_key = {}
        self._by_name = {}
        for item in items:
            assert set(item).issubset(allowed_info)
            key = item['_']
            assert isinstance(key, cls)
            assert key not in self._by_key
            self._by_key[key] = item
            name = self._name_for(item)
            assert name not in self._by_name
            self._by_name[name] = key

    def __getattr__(self, name):
        if name in self._by_name:
            return self._by_name[name]
        else:
            raise AttributeError(name)

    def __getitem__(self, key):
        return self._by_key[self.cls(key)]

    def __iter__(self):
        return iter(self._by_key)

    def __len__(self):
        return len(self._by_key)

    def __contains__(self, key):
        return self.cls(key) in self._by_key

    def get_info(self, key):
        return self._by_key.get(self.cls(key), {})

    def registered(self, key):
        """Return `key` the way it is written in the table, or `None`."""
        return self.get_info(key).get('_')

    @classmethod
    def _name_for(cls, item):
        name = item['_'].lower().replace('-', '_')
        if keyword.iskeyword(name):
            name = name + '_'
        return name
