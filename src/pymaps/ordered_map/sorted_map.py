import warnings

from collections.abc import Iterable
from pymaps.ordered_map import OrderedMap

def sort_descending(keys: list, values: list) -> None:
    # Pairwise exchange pass over both lists in place; ties keep no guaranteed order.
    for i in range(len(values)):
        for j in range(i + 1, len(values)):
            if values[i] < values[j]:
                values[i], values[j] = values[j], values[i]
                keys[i], keys[j] = keys[j], keys[i]

class DescendingSortedMap (OrderedMap):
    """ Key-value container that keeps its entries ordered by value, descending.

    Values must be mutually comparable and totally ordered (ints, floats, numpy scalars,
    Decimals ...). NaN values are rejected with UnorderedValueException.

    params:
        keys (Iterable, opt): Initial keys.
        values (Iterable, opt): Initial values, sorted together with the keys on construction.
        discard_initial (bool, opt): Start empty regardless of the initial keys and values.
                Defaults to DISCARD_INITIAL_ENTRIES.
    """
    class UnorderedValueException (ValueError):
        def __init__(self, key: any, value: any) -> None:
            super().__init__(f"Value {value!r} for key {key!r} is not ordered against other values.")

    @staticmethod
    def check_ordered(key: any, value: any) -> None:
        # NaN is the only value unequal to itself.
        if value != value:
            raise DescendingSortedMap.UnorderedValueException(key, value)

    DISCARD_INITIAL_ENTRIES = False

    def __init__(self, keys: Iterable = None, values: Iterable = None,
        discard_initial: bool = None) -> None:

        if discard_initial is None:
            discard_initial = self.DISCARD_INITIAL_ENTRIES

        self.discard_initial = discard_initial
        keys = list(keys) if keys is not None else []
        values = list(values) if values is not None else []

        if discard_initial:
            if keys or values:
                warnings.warn(f"\n{type(self).__name__} constructed with discard_initial; " +
                        f"{len(keys)} initial entries were discarded.")

            super().__init__()
            return

        for key, value in zip(keys, values):
            self.check_ordered(key, value)

        sort_descending(keys, values)
        super().__init__(keys, values)

    def _spawn(self, keys: list, values: list):
        return type(self)(keys, values, discard_initial=self.discard_initial)

    def set(self, key: any, value: any):
        """ Adds or updates the value stored for key, keeping values in descending order.

        An updated key is moved to its new position. Entries with a value equal to an
        existing one are placed after the existing run of equal values.
        """
        self.check_ordered(key, value)
        index = self._index(key)

        if index > -1:
            del self._keys[index]
            del self._values[index]

        # Walk back from the end to the first slot preceded by a value not less than value.
        pos = len(self._values)

        while pos > 0 and self._values[pos - 1] < value:
            pos -= 1

        self._keys.insert(pos, key)
        self._values.insert(pos, value)

        return self

if __name__ == "__main__":
    pass
