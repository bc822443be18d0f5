from unittest import TestSuite


def test_suite():

    from switch.tests import test_criteria, test_switch

    return TestSuite([
        test_criteria.test_suite(),
        test_switch.test_suite(),
    ])

test_suite.__test__ = False
