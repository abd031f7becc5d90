import math

__all__ = ['Numeric', 'Known', 'UNKNOWN', 'read_float', 'as_numeric']


class Numeric:
    """
    A weather reading that is either a known number or UNKNOWN.

    Ordering comparisons against UNKNOWN always evaluate False, so threshold rules can be written as plain
    comparisons without checking for missing values first.
    """
    is_known = False

    def __lt__(self, other):
        return False

    def __le__(self, other):
        return False

    def __gt__(self, other):
        return False

    def __ge__(self, other):
        return False


class Known(Numeric):
    is_known = True

    def __init__(self, value):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f'A known reading must be finite, got {value}')
        self._value = value

    @property
    def value(self) -> float:
        return self._value

    @staticmethod
    def _other(other):
        if isinstance(other, Known):
            return other.value
        if isinstance(other, Numeric):
            return None
        return other

    def __lt__(self, other):
        o = self._other(other)
        return o is not None and self._value < o

    def __le__(self, other):
        o = self._other(other)
        return o is not None and self._value <= o

    def __gt__(self, other):
        o = self._other(other)
        return o is not None and self._value > o

    def __ge__(self, other):
        o = self._other(other)
        return o is not None and self._value >= o

    def __eq__(self, other):
        o = self._other(other)
        return o is not None and self._value == o

    def __hash__(self):
        return hash(self._value)

    def __float__(self):
        return self._value

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return f'Known({self._value!r})'


class _Unknown(Numeric):

    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return hash('UNKNOWN')

    def __str__(self):
        return 'unknown'

    def __repr__(self):
        return 'UNKNOWN'


UNKNOWN = _Unknown()


def read_float(value) -> Numeric:
    """ Coerce an upstream JSON value into a reading

    :param value: anything found in the payload (number, numeric string, None, ...)
    :return: Known for finite numbers, otherwise UNKNOWN
    """
    if value is None or isinstance(value, bool):
        return UNKNOWN
    try:
        f = float(value)
    except (TypeError, ValueError):
        return UNKNOWN
    if not math.isfinite(f):
        return UNKNOWN
    return Known(f)


def as_numeric(value) -> Numeric:
    """ Accept an already built reading, a plain number or None """
    if isinstance(value, Numeric):
        return value
    return read_float(value)
