"""Expression-style 'switch' for Python

 A 'Switch' wraps one input value and tests it against an ordered chain of
 conditions, producing either a side effect or an output value::

    from switch import on

    kind = (on(code).is_(200).thenValue('ok')
                    .in_(301, 302).thenValue('redirect')
                    .when(lambda c: c >= 500).thenValue('server error')
                    .elseValue('other'))

 The first condition that holds wins; later conditions are never tested.
 Conditions are 'ICriterion' objects (see 'switch.criteria'), which compose
 with '&', '|' and '~'.
"""

import logging

from switch.interfaces import *
from switch.criteria import *
from switch.core import Switch, on, UNMATCHED, MATCHED

logging.getLogger(__name__).addHandler(logging.NullHandler())
