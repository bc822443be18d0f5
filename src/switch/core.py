"""The conditional dispatcher: an expression-style 'switch' for Python

Usage::

    label = (on(n)
        .when(lambda x: x < 0).thenValue('negative')
        .is_(0).thenValue('zero')
        .in_(1, 2, 3).thenMap(str)
        .elseValue('many'))

Each 'then' call tests the condition set by the preceding 'is_()',
'in_()' or 'when()' (as extended by 'or_()' and 'and_()').  The first one
that holds fires and moves the switch to the MATCHED state; everything
after that is a no-op until one of the 'else' calls ends the chain.
"""

import logging

from zope.interface import implementer

from switch.interfaces import ISwitch, ICriterion, NullArgument, InvalidState
from switch.criteria import criterion
from switch.criteria import EqualityCriterion, MembershipCriterion
from switch.criteria import AndCriterion, OrCriterion

__all__ = ['Switch', 'on', 'UNMATCHED', 'MATCHED']

log = logging.getLogger(__name__)


class _State(object):

    __slots__ = 'name'

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return self.name

UNMATCHED = _State('UNMATCHED')
MATCHED = _State('MATCHED')


def _notNone(arg, name):
    if arg is None:
        raise NullArgument("%s must not be None" % name)
    return arg


@implementer(ISwitch)
class Switch(object):

    """Test one input value against an ordered chain of conditions"""

    def __init__(self, input):
        self._input = input
        self._output = None
        self._condition = None
        self._state = UNMATCHED

    input = property(lambda self: self._input)
    output = property(lambda self: self._output)
    condition = property(lambda self: self._condition)
    state = property(lambda self: self._state)

    @property
    def matched(self):
        return self._state is MATCHED

    def __repr__(self):
        if self.matched:
            return 'Switch(%r, MATCHED -> %r)' % (self._input, self._output)
        return 'Switch(%r, UNMATCHED)' % (self._input,)


    # Conditions

    def is_(self, target):
        return self.when(EqualityCriterion(target))

    def in_(self, *values):
        return self.when(MembershipCriterion(values))

    def when(self, predicate):
        if self.matched:
            return self
        self._condition = criterion(_notNone(predicate, 'predicate'))
        return self

    def or_(self, other):
        """'or' the condition with 'other'

        A function or 'ICriterion' is used as a predicate; any other value,
        classes included, is a target the input must equal.  Use 'orIs()'
        to compare against a function (or 'None').
        """
        if other is None or ICriterion.providedBy(other) or (
            callable(other) and not isinstance(other, type)
        ):
            return self._combine(OrCriterion, other)
        return self.orIs(other)

    def orIs(self, target):
        return self._combine(OrCriterion, EqualityCriterion(target))

    def and_(self, predicate):
        return self._combine(AndCriterion, predicate)

    def _combine(self, combinator, other):
        if self.matched:
            return self
        _notNone(other, 'predicate')
        self._requireCondition()
        self._condition = combinator(self._condition, other)
        return self

    def _requireCondition(self):
        if self._condition is None:
            raise InvalidState("A condition must be set first.")


    # Outcomes

    def thenRun(self, action):
        if self.matched:
            return self
        _notNone(action, 'action')
        self._requireCondition()
        if self._input in self._condition:
            action(self._input)
            self._match(None)
        return self

    def thenValue(self, value):
        if self.matched:
            return self
        self._requireCondition()
        if self._input in self._condition:
            self._match(value)
        return self

    def thenMap(self, mapper):
        if self.matched:
            return self
        _notNone(mapper, 'mapper')
        self._requireCondition()
        if self._input in self._condition:
            self._match(mapper(self._input))
        return self

    def thenSupply(self, supplier):
        if self.matched:
            return self
        _notNone(supplier, 'supplier')
        self._requireCondition()
        if self._input in self._condition:
            self._match(supplier())
        return self

    def _match(self, output):
        self._output = output
        self._state = MATCHED
        log.debug("%r matched %r", self._input, self._condition)


    # Fallbacks

    def elseRun(self, action):
        if self.matched:
            return
        _notNone(action, 'action')
        log.debug("No condition matched %r, running fallback", self._input)
        action(self._input)

    def elseValue(self, value):
        if self.matched:
            return self._output
        log.debug("No condition matched %r, using fallback value", self._input)
        return value

    def elseMap(self, mapper):
        # validated even when matched; elseRun/elseValue are not
        _notNone(mapper, 'mapper')
        if self.matched:
            return self._output
        log.debug("No condition matched %r, mapping fallback", self._input)
        return mapper(self._input)

    def elseSupply(self, supplier):
        _notNone(supplier, 'supplier')
        if self.matched:
            return self._output
        log.debug("No condition matched %r, supplying fallback", self._input)
        return supplier()


def on(input):
    """Return a new, unmatched 'Switch' over 'input'"""
    return Switch(input)
