import numpy as np
import pandas as pd

from collections.abc import Iterable

class OrderedMap:
    """ Key-value container that remembers the insertion order of its keys.

    Keys and values are held in two parallel lists and looked up by linear scan,
    so keys need only support equality (unhashable keys are allowed).

    params:
        keys (Iterable, opt): Initial keys.
        values (Iterable, opt): Initial values, one per key. Sequences of different
                lengths are not checked and leave the container in an undefined state.
    """
    def __init__(self, keys: Iterable = None, values: Iterable = None) -> None:
        # Copied, never aliased with the caller's sequences.
        self._keys = list(keys) if keys is not None else []
        self._values = list(values) if values is not None else []

    @classmethod
    def from_items(cls, items: Iterable):
        # Later pairs overwrite earlier ones with an equal key.
        _map = cls()

        for key, value in items:
            _map.set(key, value)

        return _map

    @classmethod
    def from_series(cls, series: pd.Series):
        """ Builds a map from a pandas Series, keyed by the series index.
        """
        # Repeated index labels collapse like from_items before construction.
        collapsed = OrderedMap.from_items(zip(series.index.tolist(), series.tolist()))
        return cls(collapsed._keys, collapsed._values)

    def _index(self, key: any) -> int:
        # Errors raised by key comparison propagate.
        for index, _key in enumerate(self._keys):
            if _key is key or _key == key:
                return index

        return -1

    def _spawn(self, keys: list, values: list):
        # Constructs a new instance of the receiver's concrete type.
        return type(self)(keys, values)

    def get(self, key: any, default: any = None) -> any:
        """ Returns the value stored for key, or default if the key is absent.
        """
        index = self._index(key)
        return default if index < 0 else self._values[index]

    def set(self, key: any, value: any):
        """ Adds or updates the value stored for key.

        Updated keys keep their position; new keys are appended to the end.

        returns:
            self (OrderedMap): The map itself, for chaining.
        """
        index = self._index(key)

        if index < 0:
            self._keys.append(key)
            self._values.append(value)
        else:
            self._keys[index] = key
            self._values[index] = value

        return self

    def has(self, key: any) -> bool:
        return self._index(key) > -1

    def map(self, transform: callable):
        """ Creates a new map of the same class with every value transformed.

        params:
            transform (callable): Called as transform(key, value) for each entry in order,
                    returning the new value for the key. Exceptions propagate to the caller.

        returns:
            mapped (OrderedMap): A new instance of the receiver's class. The receiver is not
                    modified.
        """
        keys = self._keys.copy()
        values = [transform(key, value) for key, value in zip(self._keys, self._values)]

        return self._spawn(keys, values)

    def upsert(self, key: any, updater: callable):
        """ Sets key to the result of updater(current_value).

        params:
            key (any): The key to add or update.
            updater (callable): Receives the value currently stored for key, or None if the
                    key is absent, and returns the value to set.

        returns:
            self (OrderedMap): The map itself, for chaining.
        """
        value = updater(self.get(key))
        return self.set(key, value)

    def pop(self, key: any, default: any = None) -> any:
        index = self._index(key)

        if index < 0:
            return default

        del self._keys[index]
        return self._values.pop(index)

    def popitem(self) -> tuple[any, any]:
        if not self._keys:
            raise KeyError("popitem(): map is empty")

        return (self._keys.pop(), self._values.pop())

    def front(self) -> tuple[any, any]:
        if not self._keys:
            raise KeyError("front(): map is empty")

        return (self._keys[0], self._values[0])

    def back(self) -> tuple[any, any]:
        if not self._keys:
            raise KeyError("back(): map is empty")

        return (self._keys[-1], self._values[-1])

    def keys(self) -> any:
        return self.__iter__()

    def values(self) -> any:
        for value in self._values:
            yield value

    def items(self) -> tuple[any, any]:
        for key, value in zip(self._keys, self._values):
            yield (key, value)

    def copy(self):
        _map = self._spawn([], [])
        _map._keys = self._keys.copy()
        _map._values = self._values.copy()

        return _map

    def values_array(self, dtype: any = None) -> np.ndarray:
        return np.array(self._values, dtype=dtype)

    def to_series(self, name: str = None) -> pd.Series:
        """ Returns the values as a pandas Series indexed by the keys, in map order.
        """
        index = pd.Index(self._keys, dtype=object)
        return pd.Series(self._values, index=index, name=name)

    def __contains__(self, key: any) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return len(self._keys) > 0

    def __iter__(self) -> any:
        for key in self._keys:
            yield key

    def __getitem__(self, key: any) -> any:
        index = self._index(key)

        if index < 0:
            raise KeyError(key)

        return self._values[index]

    def __setitem__(self, key: any, value: any) -> None:
        self.set(key, value)

    def __delitem__(self, key: any) -> None:
        index = self._index(key)

        if index < 0:
            raise KeyError(key)

        del self._keys[index]
        del self._values[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items())!r})"

if __name__ == "__main__":
    pass
