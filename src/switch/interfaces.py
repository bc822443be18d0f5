from zope.interface import Interface, Attribute

__all__ = [
    'NullArgument', 'InvalidState', 'ICriterion', 'ISwitch',
]

class NullArgument(ValueError):
    """A required predicate, action, mapper or supplier was 'None'"""


class InvalidState(RuntimeError):
    """An operation needs a condition, but none has been set yet"""







class ICriterion(Interface):

    """A test to be applied to a switch's input value

    Criteria are immutable value objects: two criteria that test the same
    thing compare equal, so that 'and'/'or' combinations can drop duplicates.
    """

    def __contains__(value):
        """Return true if criterion is true for 'value'"""

    def __call__(value):
        """Same as 'value in criterion', as a 'bool'"""

    def __and__(other):
        """Return a criterion that holds when this and 'other' both hold"""

    def __or__(other):
        """Return a criterion that holds when this or 'other' holds"""

    def __invert__():
        """Return a criterion that holds when this one doesn't"""

    def __eq__(other):
        """Return true if equal"""

    def __ne__(other):
        """Return false if equal"""

    def __hash__():
        """Return hashcode"""


class ISwitch(Interface):

    """Expression-style 'switch' over a single input value

    Conditions are declared and tested in call order; the first outcome
    whose condition holds wins, after which every further condition or
    outcome call is a no-op.  The 'else' methods end the chain.
    """

    input = Attribute("""The value under evaluation""")

    output = Attribute(
        """Result of the outcome that matched ('None' until then)"""
    )

    condition = Attribute(
        """Current 'ICriterion', or 'None' if no condition was set yet"""
    )

    matched = Attribute("""True once an outcome has fired""")

    def is_(target):
        """Set condition to 'input == target'"""

    def in_(*values):
        """Set condition to 'input in values'"""

    def when(predicate):
        """Set condition to 'predicate' (a callable or 'ICriterion')"""

    def or_(other):
        """'or' the condition with a predicate, or an equality target"""

    def orIs(target):
        """'or' the condition with 'input == target'"""

    def and_(predicate):
        """'and' the condition with 'predicate'"""

    def thenRun(action):
        """If condition holds, call 'action(input)' and match"""

    def thenValue(value):
        """If condition holds, set output to 'value' and match"""

    def thenMap(mapper):
        """If condition holds, set output to 'mapper(input)' and match"""

    def thenSupply(supplier):
        """If condition holds, set output to 'supplier()' and match"""

    def elseRun(action):
        """Call 'action(input)' if nothing matched"""

    def elseValue(value):
        """Return output if matched, else 'value'"""

    def elseMap(mapper):
        """Return output if matched, else 'mapper(input)'"""

    def elseSupply(supplier):
        """Return output if matched, else 'supplier()'"""
