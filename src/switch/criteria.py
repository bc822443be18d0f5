"""Criteria: the conditions a switch tests its input against"""

from zope.interface import implementer

from switch.interfaces import ICriterion, NullArgument

__all__ = [
    'criterion', 'AbstractCriterion', 'EqualityCriterion',
    'MembershipCriterion', 'PredicateCriterion', 'AndCriterion',
    'OrCriterion', 'NotCriterion', 'AnyValue',
]


def criterion(ob):
    """Return 'ob' as an 'ICriterion', wrapping plain callables"""
    if ob is None:
        raise NullArgument("Criterion must not be None")
    if ICriterion.providedBy(ob):
        return ob
    if callable(ob):
        return PredicateCriterion(ob)
    raise TypeError("Not a criterion or callable", ob)


def _hashKey(key):
    try:
        return hash(key)
    except TypeError:
        # unhashable targets: equal criteria must still hash equal
        return 0


@implementer(ICriterion)
class AbstractCriterion(object):

    """Common behaviors for typical criteria

    Subclasses implement '__contains__()' and '_key()'; equality and hashing
    are derived from the class and the key.
    """

    __slots__ = ()

    def __contains__(self, value):
        raise NotImplementedError

    def _key(self):
        raise NotImplementedError

    def __call__(self, value):
        return value in self

    def __and__(self, other):
        return AndCriterion(self, other)

    def __rand__(self, other):
        return AndCriterion(other, self)

    def __or__(self, other):
        return OrCriterion(self, other)

    def __ror__(self, other):
        return OrCriterion(other, self)

    def __invert__(self):
        return NotCriterion(self)

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((type(self), _hashKey(self._key())))


class EqualityCriterion(AbstractCriterion):
    """Criterion that is true when the value equals 'target'"""

    __slots__ = 'target'

    def __init__(self, target):
        self.target = target

    def __contains__(self, value):
        return self.target is value or self.target == value

    def _key(self):
        return self.target

    def __repr__(self):
        return 'EqualityCriterion(%r)' % (self.target,)


class MembershipCriterion(AbstractCriterion):
    """Criterion that is true when the value is one of 'values'"""

    __slots__ = 'values'

    def __init__(self, values):
        # a tuple, not a set: values need not be hashable
        self.values = tuple(values)

    def __contains__(self, value):
        return value in self.values

    def _key(self):
        return self.values

    def __repr__(self):
        return 'MembershipCriterion%r' % (self.values,)


class PredicateCriterion(AbstractCriterion):
    """Criterion that is true when 'func(value)' is true"""

    __slots__ = 'func'

    def __init__(self, func):
        if func is None:
            raise NullArgument("Predicate must not be None")
        self.func = func

    def __contains__(self, value):
        return bool(self.func(value))

    def _key(self):
        return self.func

    def __repr__(self):
        return 'PredicateCriterion(%r)' % (self.func,)


class MultiCriterion(AbstractCriterion):
    """Abstract base for boolean combinations of criteria"""

    __slots__ = 'criteria'

    def __new__(klass, *criteria):
        allcriteria = []
        for c in map(criterion, criteria):
            if c.__class__ is klass:
                # flatten nested combinations of the same kind
                allcriteria.extend(
                    [sub for sub in c.criteria if sub not in allcriteria]
                )
            elif c not in allcriteria:
                allcriteria.append(c)
        if len(allcriteria)==1:
            return allcriteria[0]
        self = object.__new__(klass)
        self.criteria = tuple(allcriteria)
        return self

    def _key(self):
        return self.criteria

    def __repr__(self):
        return '%s%r' % (self.__class__.__name__, self.criteria)


class AndCriterion(MultiCriterion):
    """All criteria must be true for the value, tested left to right"""

    __slots__ = ()

    def __invert__(self):
        return OrCriterion(*[~c for c in self.criteria])

    def __contains__(self, value):
        for c in self.criteria:
            if value not in c:
                return False
        return True


class OrCriterion(MultiCriterion):
    """At least one criterion must be true for the value, left to right"""

    __slots__ = ()

    def __invert__(self):
        return AndCriterion(*[~c for c in self.criteria])

    def __contains__(self, value):
        for c in self.criteria:
            if value in c:
                return True
        return False


class NotCriterion(AbstractCriterion):

    __slots__ = 'criterion'

    def __init__(self, test):
        self.criterion = criterion(test)

    def __invert__(self):
        return self.criterion

    def __contains__(self, value):
        return value not in self.criterion

    def _key(self):
        return self.criterion

    def __repr__(self):
        return 'NotCriterion(%r)' % (self.criterion,)


class AnyValue(AbstractCriterion):
    """A "wildcard" criterion that is always true"""

    __slots__ = ()

    def __contains__(self, value):  return True
    def _key(self):                 return None
    def __repr__(self):             return "AnyValue"

AnyValue = AnyValue()
